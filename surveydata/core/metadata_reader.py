"""
Settings module

Reads the package defaults from ``config/default_settings.yaml`` and
applies overrides from the package settings file and from
``surveydata_settings.yaml`` in the working directory.
"""
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, field_validator
import yaml


PACKAGE_DIRECTORY = Path(__file__).parents[1]
ROOT_DIRECTORY = Path().absolute()


_How = Literal["inner", "left", "right", "outer"]


def open_yaml(
    path: Path | str,
    location: Literal["package", "root"] = "package",
):
    """
    Read the contents of a YAML file and return it as a dictionary.

    :param path: The path to the YAML file, relative to the package
        or the working directory.
    :type path: str

    :return: The contents of the YAML file as a dictionary.
    :rtype: dict

    :raises yaml.YAMLError: If there is an error parsing the YAML file.

    """
    path = Path(path) if isinstance(path, str) else path
    if path.is_absolute():
        pass
    elif location == "root":
        path = ROOT_DIRECTORY.joinpath(path)
    else:
        path = PACKAGE_DIRECTORY.joinpath(path)

    with open(path, mode="r", encoding="utf8") as yaml_file:
        yaml_text = yaml_file.read()
    yaml_content = yaml.safe_load(yaml_text)
    return {} if yaml_content is None else yaml_content


def flatten_dict(dictionary: dict) -> dict[tuple[Any, ...], Any]:
    flattened_dict = {}
    for key, value in dictionary.items():
        if isinstance(value, dict):
            flattend_value = flatten_dict(value)
            for sub_key, sub_value in flattend_value.items():
                flattened_dict[(key,) + sub_key] = sub_value
        else:
            flattened_dict[(key,)] = value
    return flattened_dict


def collect_settings() -> dict[tuple[Any, ...], Any]:
    sample_settings_path = PACKAGE_DIRECTORY.joinpath("config", "default_settings.yaml")
    _settings = flatten_dict(open_yaml(sample_settings_path))

    package_settings_path = PACKAGE_DIRECTORY.joinpath(_settings[("package_settings",)])
    if package_settings_path.exists():
        package_settings = flatten_dict(open_yaml(package_settings_path))
        _update_settings(_settings, package_settings)

    root_setting_path = ROOT_DIRECTORY.joinpath(_settings[("local_settings",)])
    if root_setting_path.exists():
        root_settings = flatten_dict(open_yaml(root_setting_path))
        _update_settings(_settings, root_settings)

    return _settings


def _update_settings(_settings, new_settings):
    for key, value in new_settings.items():
        if key in _settings:
            _settings[key] = value


settings = collect_settings()


class TextSettings(BaseModel):
    trim_common_suffix: bool = settings[("text", "trim_common_suffix")]


class MergeSettings(BaseModel):
    how: _How = settings[("merge", "how")]
    suffixes: tuple[str, str] = tuple(settings[("merge", "suffixes")])  # type: ignore

    @field_validator("suffixes")
    @classmethod
    def _check_suffixes(cls, value: tuple[str, str]) -> tuple[str, str]:
        if value[0] == value[1]:
            raise ValueError("Merge suffixes must differ")
        return value


class Defaults(BaseModel):
    separator: str = settings[("separator",)]
    dont_know: str = settings[("dont_know",)]
    log_level: str = settings[("logging", "level")]

    text: TextSettings = TextSettings()
    merge: MergeSettings = MergeSettings()


defaults = Defaults()
