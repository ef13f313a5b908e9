import pytest

from rigcontrol import config
from rigcontrol.services.registry import RigRegistry, StatusParseError


def test_seeded_rigs_use_defaults():
    registry = RigRegistry([3, 1])

    assert [r.id for r in registry.all()] == [1, 3]
    rig = registry.get(1)
    assert rig.position == config.DEFAULT_POSITION
    assert rig.distance == config.DEFAULT_DISTANCE
    assert rig.motion is False
    assert rig.state == "OFFLINE"


def test_position_and_distance_updates():
    registry = RigRegistry([1])

    registry.apply(1, "position", "152.5")
    rig = registry.apply(1, "distance", " 40 ")

    assert rig.position == 152.5
    assert rig.distance == 40.0
    assert rig.object_height == 112.5


@pytest.mark.parametrize("payload, expected", [("1", True), ("true", True), ("0", False), ("false", False)])
def test_motion_flag(payload, expected):
    registry = RigRegistry([2])

    rig = registry.apply(2, "motion", payload)

    assert rig.motion is expected


def test_state_name_is_stored_upper_case():
    registry = RigRegistry()

    rig = registry.apply(4, "state", "standby")

    assert rig.state == "STANDBY"


def test_unknown_rig_is_registered_on_first_status():
    registry = RigRegistry([1])

    registry.apply(9, "position", "10")

    assert len(registry) == 2
    assert registry.get(9).position == 10.0


def test_non_status_topic_is_ignored():
    registry = RigRegistry([1])

    assert registry.apply(1, "flash", "500") is None
    assert registry.apply(7, "naos/set/automate", "on") is None
    assert registry.get(7) is None


@pytest.mark.parametrize(
    "topic, payload",
    [("position", "high"), ("distance", ""), ("motion", "maybe"), ("state", " "),
     ("position", "nan"), ("distance", "inf"), ("position", "-Infinity")],
)
def test_bad_payload_raises_and_leaves_rig_untouched(topic, payload):
    registry = RigRegistry([1])

    with pytest.raises(StatusParseError) as info:
        registry.apply(1, topic, payload)

    assert info.value.topic == topic
    rig = registry.get(1)
    assert rig.position == config.DEFAULT_POSITION
    assert rig.motion is False
    assert rig.state == "OFFLINE"


def test_bad_payload_for_unknown_rig_does_not_register_it():
    registry = RigRegistry()

    with pytest.raises(StatusParseError):
        registry.apply(5, "position", "?")

    assert registry.get(5) is None


def test_rig_label_is_zero_padded():
    registry = RigRegistry([7, 12])

    assert registry.get(7).label == "07"
    assert registry.get(12).label == "12"
