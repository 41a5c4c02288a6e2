"""
Connection settings for the vSphere management endpoint
"""

import os
from dataclasses import dataclass, fields
from typing import Dict, Any, Optional
import yaml
from .exceptions import ValidationError


ENV_PREFIX = "VCADMIN_"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class VSphereConfig:
    """vCenter endpoint, credentials and client behaviour"""
    host: str
    username: str
    password: str
    port: int = 443
    disable_ssl_verification: bool = False
    task_poll_interval: float = 0.5
    accept_host_thumbprint: bool = True

    def __post_init__(self):
        for name in ('host', 'username', 'password'):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ValidationError(f"Missing required setting: {name}", code="missing_setting",
                                      details={'setting': name})
        self.port = _coerce(self.port, int, 'port')
        self.task_poll_interval = _coerce(self.task_poll_interval, float, 'task_poll_interval')
        self.disable_ssl_verification = _as_bool(self.disable_ssl_verification)
        self.accept_host_thumbprint = _as_bool(self.accept_host_thumbprint)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VSphereConfig':
        """Build from a mapping, ignoring unknown keys"""
        if not isinstance(data, dict):
            raise ValidationError(f"Configuration must be a mapping, got {type(data).__name__}",
                                  code="invalid_config")
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        for name in ('host', 'username', 'password'):
            values.setdefault(name, None)
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'VSphereConfig':
        """Build from VCADMIN_* environment variables"""
        environ = os.environ if environ is None else environ
        data = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key in environ:
                data[f.name] = environ[key]
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str) -> 'VSphereConfig':
        """Build from a YAML file, optionally nested under a 'vsphere' key"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValidationError(f"Configuration file {path} must contain a mapping",
                                  code="invalid_config", details={'path': path})
        section = data.get('vsphere', data)
        if not isinstance(section, dict):
            raise ValidationError(f"Section 'vsphere' in {path} must be a mapping",
                                  code="invalid_config", details={'path': path})
        return cls.from_dict(section)


def _coerce(value: Any, kind: type, name: str) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Setting '{name}' must be a {kind.__name__}, got {value!r}",
                              code="invalid_setting", details={'setting': name})


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
