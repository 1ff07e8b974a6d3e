from melbank import (
    Filterbank,
    InvalidParameterError,
    MelbankError,
    compute_mel_filterbank,
    mel_filterbank,
)


def test_public_imports() -> None:
    assert Filterbank is not None
    assert compute_mel_filterbank is not None
    assert mel_filterbank is not None


def test_invalid_parameter_is_a_value_error() -> None:
    assert issubclass(InvalidParameterError, MelbankError)
    assert issubclass(InvalidParameterError, ValueError)
