"""Tests for the phase transition table."""

from just_breathe import NEXT_PHASE, Phase, next_phase


def test_table_covers_every_phase():
    """Every phase has exactly one successor."""
    assert set(NEXT_PHASE) == set(Phase)
    assert set(NEXT_PHASE.values()) == set(Phase)


def test_box_breathing_order():
    """Inhale, hold, exhale, hold, and back to inhale."""
    assert next_phase(Phase.INHALE) is Phase.HOLD_FULL
    assert next_phase(Phase.HOLD_FULL) is Phase.EXHALE
    assert next_phase(Phase.EXHALE) is Phase.HOLD_EMPTY
    assert next_phase(Phase.HOLD_EMPTY) is Phase.INHALE


def test_four_steps_return_to_start():
    """The cycle has length four from any phase."""
    for start in Phase:
        phase = start
        visited = []
        for _ in range(4):
            visited.append(phase)
            phase = next_phase(phase)
        assert phase is start
        assert len(set(visited)) == 4
