import pytest

from surveydata.core import metadata_reader
from surveydata.core.metadata_reader import (
    Defaults,
    MergeSettings,
    TextSettings,
    flatten_dict,
    open_yaml,
)


def test_flatten_dict():
    for dictionary,                             flattened in [
        [{"a": 1},                              {("a",): 1}                             ],
        [{"a": {"b": 1, "c": 2}},               {("a", "b"): 1, ("a", "c"): 2}          ],
        [{"a": {"b": {"c": 1}}, "d": [1, 2]},   {("a", "b", "c"): 1, ("d",): [1, 2]}    ],
    ]:
        assert flatten_dict(dictionary) == flattened


class TestDefaults:
    def test_package_defaults(self):
        default_settings = open_yaml("config/default_settings.yaml")
        assert default_settings["separator"] == "_"
        defaults = Defaults()
        assert defaults.separator == "_"
        assert defaults.dont_know == "Don't Know"
        assert defaults.merge.how == "inner"
        assert defaults.merge.suffixes == (".x", ".y")
        assert defaults.text.trim_common_suffix is False

    def test_local_settings_override(self, tmp_path, monkeypatch):
        (tmp_path / "surveydata_settings.yaml").write_text(
            "separator: '.'\nmerge:\n  how: left\nunknown_key: 1\n", encoding="utf8"
        )
        monkeypatch.setattr(metadata_reader, "ROOT_DIRECTORY", tmp_path)
        settings = metadata_reader.collect_settings()
        assert settings[("separator",)] == "."
        assert settings[("merge", "how")] == "left"
        assert ("unknown_key",) not in settings

    def test_settings_validation(self):
        with pytest.raises(ValueError):
            MergeSettings(how="cross-join")
        assert TextSettings(trim_common_suffix=True).trim_common_suffix
