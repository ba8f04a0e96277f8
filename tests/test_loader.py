"""
Tests for loading and validating config.json.
"""

import os
import random
from pathlib import Path

import pytest

from customsound.config.loader import (
    MISSING_SOUND,
    default_weight,
    get_template_config,
    load,
    read_config,
    read_groups,
    resolve_sound_type,
    validate_group,
    validate_groups,
)
from customsound.core.exceptions import (
    ConfigEmptyError,
    ConfigGroupsEmptyError,
    ConfigMissingError,
    ConfigParseError,
)
from customsound.core.types import SoundType
from customsound.models.sound import ConfigRoot, SoundGroup
from customsound.selection.selector import pick


# ============================================================================
# Reading
# ============================================================================

class TestReadConfig:
    """read_config() raises typed errors; load() turns them into []."""

    def test_missing_file(self, mod_dir: Path):
        with pytest.raises(ConfigMissingError):
            read_config(mod_dir / "config.json")

    def test_blank_file(self, write_config):
        path = write_config("   \n\t ")
        with pytest.raises(ConfigEmptyError):
            read_config(path)

    def test_malformed_json(self, write_config):
        path = write_config('{"soundGroups": [')
        with pytest.raises(ConfigParseError) as exc_info:
            read_config(path)
        assert exc_info.value.detail

    def test_schema_mismatch(self, write_config):
        path = write_config({"soundGroups": [{"radius": "far"}]})
        with pytest.raises(ConfigParseError) as exc_info:
            read_config(path)
        assert "radius" in exc_info.value.detail

    def test_byte_order_mark(self, mod_dir: Path):
        path = mod_dir / "config.json"
        path.write_bytes('\ufeff{"soundGroups": [{"name": "bom"}]}'.encode("utf-8"))

        root = read_config(path)
        assert root.sound_groups[0].name == "bom"

    def test_no_groups(self, write_config):
        path = write_config({"soundGroups": [None]})
        with pytest.raises(ConfigGroupsEmptyError):
            read_groups(path)

    def test_template_is_valid(self, write_config):
        path = write_config(get_template_config())
        groups = read_groups(path)
        assert len(groups) == 4


# ============================================================================
# Validation
# ============================================================================

class TestValidateGroup:
    """Tests for checking a single group against the disk."""

    def test_existing_files_become_absolute(self, mod_dir: Path, add_sounds):
        expected = add_sounds("a.ogg", "sub/b.ogg")
        group = SoundGroup(sounds=("a.ogg", "sub/b.ogg"))

        result = validate_group(group, str(mod_dir / "sounds"))

        assert list(result.sounds) == [os.path.abspath(p) for p in expected]
        assert all(os.path.isabs(s) for s in result.sounds)

    def test_missing_files_become_sentinels(self, mod_dir: Path):
        group = SoundGroup(sounds=("a.ogg", "b.ogg", "c.ogg"))

        result = validate_group(group, str(mod_dir / "sounds"))

        assert result.sounds == (MISSING_SOUND,) * 3

    def test_partially_missing_keeps_positions(self, mod_dir: Path, add_sounds):
        add_sounds("a.ogg", "c.ogg")
        group = SoundGroup(sounds=("a.ogg", "b.ogg", "c.ogg"))

        result = validate_group(group, str(mod_dir / "sounds"))

        assert len(result.sounds) == 3
        assert result.sounds[1] == MISSING_SOUND
        assert result.sounds[0].endswith("a.ogg")
        assert result.sounds[2].endswith("c.ogg")
        assert result.valid_sound_count == 2

    def test_null_and_empty_entries_untouched(self, mod_dir: Path):
        group = SoundGroup(sounds=(None, ""))
        result = validate_group(group, str(mod_dir / "sounds"))
        assert result.sounds == (None, "")

    def test_directory_is_not_a_sound(self, mod_dir: Path):
        (mod_dir / "sounds" / "folder.ogg").mkdir()
        result = validate_group(SoundGroup(sounds=("folder.ogg",)), str(mod_dir / "sounds"))
        assert result.sounds == (MISSING_SOUND,)

    def test_unknown_sounds_dir(self, add_sounds):
        add_sounds("a.ogg")
        result = validate_group(SoundGroup(sounds=("a.ogg",)), "")
        assert result.sounds == (MISSING_SOUND,)

    def test_input_is_not_modified(self, mod_dir: Path, add_sounds):
        add_sounds("a.ogg")
        group = SoundGroup(sounds=("a.ogg",), sound_type_raw="combat")

        validate_group(group, str(mod_dir / "sounds"))

        assert group.sounds == ("a.ogg",)
        assert group.weight == -1
        assert group.sound_type is SoundType.UNKNOWN_NOISE

    def test_sound_type_resolution(self, mod_dir: Path):
        sounds_dir = str(mod_dir / "sounds")

        assert validate_group(SoundGroup(sound_type_raw="Combat"), sounds_dir).sound_type is SoundType.COMBAT
        assert validate_group(SoundGroup(sound_type_raw="shout"), sounds_dir).sound_type is SoundType.UNKNOWN_NOISE
        assert validate_group(SoundGroup(), sounds_dir).sound_type is SoundType.UNKNOWN_NOISE

    def test_raw_sound_type_is_kept(self, mod_dir: Path):
        result = validate_group(SoundGroup(sound_type_raw="COMBAT"), str(mod_dir / "sounds"))
        assert result.sound_type_raw == "COMBAT"

    @pytest.mark.parametrize("sounds, texts, expected", [
        ((), (), 1),
        (("a", "b", "c"), (), 3),
        ((), ("x", "y"), 2),
        (("a", "b"), ("x", "y", "z"), 6),
        (("a", None), (None,), 2),
    ])
    def test_unset_weight_is_derived(self, mod_dir: Path, sounds, texts, expected):
        group = SoundGroup(sounds=sounds, texts=texts)

        assert default_weight(group) == expected
        assert validate_group(group, str(mod_dir / "sounds")).weight == expected

    def test_explicit_weight_kept(self, mod_dir: Path):
        sounds_dir = str(mod_dir / "sounds")

        assert validate_group(SoundGroup(sounds=("a", "b"), weight=5), sounds_dir).weight == 5
        assert validate_group(SoundGroup(sounds=("a", "b"), weight=0), sounds_dir).weight == 0

    def test_validating_twice_changes_nothing(self, mod_dir: Path, add_sounds):
        add_sounds("a.ogg")
        group = SoundGroup(
            name="g",
            sounds=("a.ogg", "missing.ogg", None),
            texts=("Hi",),
            sound_type_raw="combat",
        )
        sounds_dir = str(mod_dir / "sounds")

        once = validate_group(group, sounds_dir)
        twice = validate_group(once, sounds_dir)

        assert twice == once

    def test_logs_valid_count(self, mod_dir: Path, add_sounds, info_logs):
        add_sounds("a.ogg")
        validate_group(SoundGroup(name="mixed", sounds=("a.ogg", "b.ogg")), str(mod_dir / "sounds"))

        assert "'mixed' processed: 1/2 valid sound files" in info_logs.text
        assert "b.ogg" in info_logs.text


class TestValidateGroups:
    """Tests for the whole-list policy."""

    def test_order_preserved_and_nulls_skipped(self, mod_dir: Path):
        groups = [SoundGroup(name="a"), None, SoundGroup(name="b"), SoundGroup(name="c")]
        result = validate_groups(groups, str(mod_dir / "sounds"))
        assert [g.name for g in result] == ["a", "b", "c"]

    def test_all_missing_group_is_kept_by_default(self, mod_dir: Path):
        groups = [SoundGroup(name="ghost", sounds=("nope.ogg",), texts=("Boo",))]

        result = validate_groups(groups, str(mod_dir / "sounds"))

        assert len(result) == 1
        assert result[0].sounds == (MISSING_SOUND,)

    def test_drop_invalid_groups(self, mod_dir: Path, add_sounds):
        add_sounds("ok.ogg")
        groups = [
            SoundGroup(name="ghost", sounds=("nope.ogg",)),
            SoundGroup(name="caption only", texts=("...",)),
            SoundGroup(name="fine", sounds=("ok.ogg", "nope.ogg")),
        ]

        result = validate_groups(groups, str(mod_dir / "sounds"), drop_invalid_groups=True)

        assert [g.name for g in result] == ["caption only", "fine"]

    def test_weights_never_negative(self, mod_dir: Path):
        groups = [SoundGroup(weight=-1), SoundGroup(weight=-7), SoundGroup(weight=0)]
        result = validate_groups(groups, str(mod_dir / "sounds"))
        assert all(g.weight >= 0 for g in result)


# ============================================================================
# Loading
# ============================================================================

class TestLoad:
    """load() never raises and always returns a list."""

    def test_missing_config(self, mod_dir: Path, caplog):
        assert load(mod_dir) == []
        assert "does not exist" in caplog.text

    def test_empty_config(self, write_config, mod_dir: Path, caplog):
        write_config("")
        assert load(mod_dir) == []
        assert "empty" in caplog.text

    def test_malformed_config(self, write_config, mod_dir: Path, caplog):
        write_config("{not json at all")
        assert load(mod_dir) == []
        assert "JSON parse error" in caplog.text

    def test_not_an_object(self, write_config, mod_dir: Path):
        write_config("[1, 2, 3]")
        assert load(mod_dir) == []

    def test_no_groups(self, write_config, mod_dir: Path, caplog):
        write_config({"soundGroups": []})
        assert load(mod_dir) == []
        assert "no sound groups" in caplog.text

    def test_unknown_base_dir(self):
        assert load("") == []

    def test_numeric_name_and_captions_load(self, write_config, mod_dir: Path):
        write_config('{"soundGroups": [{"name": 5, "texts": [1, true]}, {"name": "words", "texts": ["Hi"]}]}')

        groups = load(mod_dir)

        assert [g.name for g in groups] == ["5", "words"]
        assert groups[0].texts == ("1", "true")

    def test_unreadable_bytes(self, mod_dir: Path):
        (mod_dir / "config.json").write_bytes(b"\xff\xfe\x00garbage")
        assert load(mod_dir) == []

    def test_sounds_resolved_against_sounds_folder(self, write_config, add_sounds, mod_dir: Path):
        add_sounds("a.ogg")
        write_config({"soundGroups": [{"sounds": ["a.ogg", "b.ogg"]}]})

        groups = load(mod_dir)

        assert groups[0].sounds == (os.path.abspath(mod_dir / "sounds" / "a.ogg"), "")

    def test_custom_sounds_dir(self, write_config, temp_dir: Path, mod_dir: Path):
        other = temp_dir / "elsewhere"
        other.mkdir()
        (other / "x.ogg").write_bytes(b"")
        write_config({"soundGroups": [{"sounds": ["x.ogg"]}]})

        groups = load(mod_dir, str(other))

        assert groups[0].sounds == (os.path.abspath(other / "x.ogg"),)

    def test_drop_everything_returns_empty(self, write_config, mod_dir: Path):
        write_config({"soundGroups": [{"sounds": ["nope.ogg"]}]})
        assert load(mod_dir, drop_invalid_groups=True) == []

    def test_first_group_only_scenario(self, write_config, add_sounds, mod_dir: Path):
        """a.ogg present, b.ogg absent, second group weight 0."""
        add_sounds("a.ogg")
        write_config('{"soundGroups":[{"sounds":["a.ogg"],"texts":["Hi"],"weight":1},'
                     '{"sounds":["b.ogg"],"weight":0}]}')

        groups = load(mod_dir)

        assert len(groups) == 2
        assert groups[1].sounds == ("",)

        rng = random.Random(42)
        a_path = os.path.abspath(mod_dir / "sounds" / "a.ogg")
        for _ in range(200):
            selected = pick(groups, rng)
            assert selected.sound == a_path
            assert selected.text == "Hi"


def test_resolve_sound_type_fallback():
    assert resolve_sound_type(None) is SoundType.UNKNOWN_NOISE
    assert resolve_sound_type("grenadeDropSound") is SoundType.GRENADE_DROP


def test_config_root_dump_round_trip(mod_dir: Path, add_sounds):
    """A dumped, validated config loads back to the same groups."""
    add_sounds("a.ogg")
    group = validate_group(SoundGroup(name="g", sounds=("a.ogg",), sound_type_raw="combat"), str(mod_dir / "sounds"))

    dumped = ConfigRoot(sound_groups=[group]).model_dump_json(by_alias=True)
    reloaded = ConfigRoot.model_validate_json(dumped).sound_groups[0]

    assert reloaded == group
