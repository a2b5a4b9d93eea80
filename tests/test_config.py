import json

import pytest

from teamdraw.config import (
    DEFAULT_CONFIG_FILE,
    default_config,
    find_default_config,
    load_config,
    parse_config,
    save_config,
)
from teamdraw.errors import InvalidConfigurationError
from teamdraw.models import Participant
from teamdraw.teams import DEFAULT_MAX_ATTEMPTS


def sample_data(**overrides):
    data = {
        "players": [
            {"name": "Alex", "score": 3},
            {"name": "Bruno", "score": 4},
            {"name": "Duda", "score": 4.5},
            {"name": "Juan", "score": 2},
        ],
        "teamNames": ["Red", "Blue"],
    }
    data.update(overrides)
    return data


def test_parse_valid_config():
    config = parse_config(sample_data())

    assert config.participants[0] == Participant("Alex", 3.0)
    assert config.group_names == ["Red", "Blue"]
    assert config.group_size() == 2
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert config.score_scale is None
    assert config.random_seed is None


def test_rating_is_accepted_for_score():
    data = sample_data(players=[{"name": "A", "rating": 1.5}, {"name": "B", "rating": 2}])
    config = parse_config(data)
    assert [p.rating for p in config.participants] == [1.5, 2.0]


def test_optional_fields():
    config = parse_config(
        sample_data(scoreScale={"min": 1, "max": 5}, maxAttempts=50, randomSeed=42)
    )
    assert config.score_scale == (1.0, 5.0)
    assert config.max_attempts == 50
    assert config.random_seed == 42


def test_null_max_attempts_means_unbounded():
    assert parse_config(sample_data(maxAttempts=None)).max_attempts is None


def test_uneven_division_rejected():
    data = sample_data(teamNames=["Red", "Blue", "Green"])
    with pytest.raises(InvalidConfigurationError, match="evenly divisible"):
        parse_config(data)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"players": []}, "Players list"),
        ({"players": None}, "Players list"),
        ({"teamNames": []}, "Team names"),
        ({"teamNames": None}, "Team names"),
        ({"scoreScale": {"min": 5, "max": 1}}, "minimum must be less"),
        ({"scoreScale": {"min": 1, "max": 4}}, "outside the valid range"),
        ({"scoreScale": "1-5"}, "scoreScale"),
        ({"maxAttempts": 0}, "maxAttempts"),
        ({"maxAttempts": "lots"}, "maxAttempts"),
        ({"players": [{"score": 3}, {"name": "B", "score": 3}]}, "no name"),
        ({"players": [{"name": "A"}, {"name": "B", "score": 3}]}, "no score"),
        ({"players": [{"name": "A", "score": "high"}, {"name": "B", "score": 3}]}, "must be a number"),
        ({"players": [{"name": "A", "score": True}, {"name": "B", "score": 3}]}, "must be a number"),
        ({"players": ["A", "B"]}, "must be an object"),
        ({"randomSeed": [1, 2]}, "randomSeed must be an integer, string or null"),
        ({"randomSeed": {"seed": 1}}, "randomSeed"),
        ({"randomSeed": True}, "randomSeed"),
        ({"randomSeed": 4.5}, "randomSeed"),
        ({"teamNames": [None, "Blue"]}, "Team name #1"),
        ({"teamNames": ["Red", 3]}, "Team name #2"),
        ({"teamNames": ["Red", "  "]}, "Team name #2"),
    ],
)
def test_invalid_configs(overrides, message):
    with pytest.raises(InvalidConfigurationError, match=message):
        parse_config(sample_data(**overrides))


def test_non_object_rejected():
    with pytest.raises(InvalidConfigurationError):
        parse_config([1, 2, 3])


def test_load_and_save(tmp_path):
    path = tmp_path / "teams.json"
    path.write_text(json.dumps(sample_data(scoreScale={"min": 1, "max": 5})), encoding="utf-8")

    config = load_config(str(path))
    copy_path = tmp_path / "copy.json"
    save_config(config, str(copy_path))

    saved = json.loads(copy_path.read_text(encoding="utf-8"))
    assert saved["teamNames"] == ["Red", "Blue"]
    assert saved["scoreScale"] == {"min": 1.0, "max": 5.0}
    assert saved["players"][2] == {"name": "Duda", "score": 4.5}
    assert load_config(str(copy_path)).participants == config.participants


def test_missing_file(tmp_path):
    with pytest.raises(InvalidConfigurationError, match="not found") as exc:
        load_config(str(tmp_path / "nope.json"))
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_broken_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ players: ", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match="not valid JSON"):
        load_config(str(path))


def test_default_config():
    config = default_config()
    assert len(config.participants) == 20
    assert config.group_size() == 2
    assert config.group_names == []


def test_find_default_config(tmp_path):
    assert find_default_config(str(tmp_path)) is None
    (tmp_path / DEFAULT_CONFIG_FILE).write_text("{}", encoding="utf-8")
    assert find_default_config(str(tmp_path)) == str(tmp_path / DEFAULT_CONFIG_FILE)


def test_string_seed_accepted():
    assert parse_config(sample_data(randomSeed="league-night")).random_seed == "league-night"


def test_team_names_trimmed():
    assert parse_config(sample_data(teamNames=[" Red ", "Blue"])).group_names == ["Red", "Blue"]
