"""Unit tests for notelinks.api.StageResult module."""

from collections.abc import Iterator

from notelinks.api.StageResult import StageResult


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    assert list(result.progress_callback(result)) == [(1.0, "Complete")]
    assert result.result == "Done"
    assert result.output == {"test": True}
    assert result.success is True
