from appbuilder.domain.shared import (
    BuildError,
    Err,
    ErrorKind,
    Ok,
    config_error,
    flat_map,
    producer_error,
)


def test_flat_map_passes_ok_value_on():
    assert flat_map(Ok(2), lambda v: Ok(v * 3)) == Ok(6)


def test_flat_map_stops_after_first_err():
    calls = []

    def step(value):
        calls.append(value)
        return Err(producer_error("step failed"))

    result = flat_map(flat_map(Ok(1), step), step)

    assert calls == [1]
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.PRODUCER


def test_build_error_str_names_kind_and_task():
    error = BuildError(ErrorKind.DIRECTORY, "cannot create out/", task="app")
    assert str(error) == "[directory] task 'app': cannot create out/"
    assert str(config_error("missing")) == "[config-load] missing"
