from .env import collect_env, parse_bool_env, parse_str_env

__all__ = [
    "collect_env",
    "parse_bool_env",
    "parse_str_env",
]
