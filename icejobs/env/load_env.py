import os
from typing import Callable, Dict, Iterable, Set, Tuple, TypeVar

from dotenv import dotenv_values
from pydantic import BaseModel

from .env import Env, PrimaryType

T = TypeVar("T", bound=BaseModel)


def _convert(
    envars: Dict[str, Callable[[str], PrimaryType]],
    source: Iterable[Tuple[str, str | None]],
    keep_empty: Set[str],
) -> Dict[str, PrimaryType]:
    # Unknown names and unset values are skipped so they fall back to defaults
    return {
        envar_name: envars[envar_name](envar_value)
        for envar_name, envar_value in source
        if envar_name in envars
        and envar_value is not None
        and (envar_value or envar_name in keep_empty)
    }


def load_env(
    default: type[Env],
    env_file: str | None = None,
    override: T | None = None,
) -> T:
    """
    Build settings from the process environment, then the ``.env`` file,
    then ``override``, each source replacing values set by the one before.
    """
    envars = default.types_map()
    keep_empty = default.keep_empty()

    if env_file is None:
        env_file = ".env"

    values = _convert(
        envars,
        ((envar_name, os.getenv(envar_name)) for envar_name in envars),
        keep_empty,
    )

    if os.path.exists(env_file):
        values.update(
            _convert(
                envars,
                dotenv_values(dotenv_path=env_file).items(),
                keep_empty,
            )
        )

    if override is None:
        return default(**values)

    values.update(override.model_dump(exclude_unset=True))

    return type(override)(**values)
