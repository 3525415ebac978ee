import pytest

from models.schemas.evaluation_result import EvaluationResult
from services.errors import GENERIC_ERROR
from ui.state import InvalidTransition, PageState, Phase


@pytest.fixture
def result(sample_result):
    return EvaluationResult.model_validate(sample_result)


def test_idle_cannot_submit_blank():
    state = PageState()
    assert state.phase == Phase.IDLE
    assert not state.can_submit


@pytest.mark.parametrize("profile", ["", "   ", "\n\t"])
def test_blank_begin_is_noop(profile):
    state = PageState()
    assert state.begin(profile) is False
    assert state == PageState()


def test_loading_disables_submit(sample_profile):
    state = PageState(profile=sample_profile)
    assert state.can_submit
    assert state.begin(sample_profile)
    assert state.phase == Phase.LOADING
    assert not state.can_submit


def test_second_submit_while_loading_rejected(sample_profile):
    state = PageState()
    state.begin(sample_profile)
    assert state.begin("another profile") is False
    assert state.profile == sample_profile


def test_success_enables_submit_again(sample_profile, result):
    state = PageState()
    state.begin(sample_profile)
    state.succeed(result)
    assert state.phase == Phase.RESULT
    assert state.result == result
    assert state.can_submit


def test_failure_shows_generic_message(sample_profile):
    state = PageState()
    state.begin(sample_profile)
    state.fail()
    assert state.phase == Phase.ERROR
    assert state.error == GENERIC_ERROR
    assert state.result is None


def test_resubmit_clears_previous_result(sample_profile, result):
    state = PageState()
    state.begin(sample_profile)
    state.succeed(result)
    assert state.begin("a different candidate")
    assert state.result is None


def test_reset_clears_input_and_result(sample_profile, result):
    state = PageState()
    state.begin(sample_profile)
    state.succeed(result)
    state.reset()
    assert state == PageState()


def test_cannot_settle_without_loading(result):
    with pytest.raises(InvalidTransition):
        PageState().succeed(result)
    with pytest.raises(InvalidTransition):
        PageState().fail()


def test_cannot_reset_while_loading(sample_profile):
    state = PageState()
    state.begin(sample_profile)
    with pytest.raises(InvalidTransition):
        state.reset()
