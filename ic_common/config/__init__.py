"""Configuration helpers shared by the ichoose tools."""

from ic_common.config.env import parse_bool_env, resolve_path_env

__all__ = ["parse_bool_env", "resolve_path_env"]
