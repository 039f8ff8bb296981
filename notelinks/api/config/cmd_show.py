"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .NotesConfig import NotesConfig


def cmd_show() -> StageResult:
    """Show the effective configuration and where it came from."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = get_config_path()
        yield (0.3, "Loading configuration...")
        try:
            config = NotesConfig.load(path)
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                config_path=str(path),
                from_file=True,
                content={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        from_file = path.exists()
        source = str(path) if from_file else "defaults"
        result_obj.result = f"Configuration loaded from {source}"
        result_obj.output = ConfigShowOutput(
            config_path=str(path),
            from_file=from_file,
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
