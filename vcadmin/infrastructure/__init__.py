"""
Infrastructure providers for vcadmin
"""
