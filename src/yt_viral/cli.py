import json, os, subprocess, sys
from pathlib import Path
from typing import Optional
import typer

from yt_viral.client import PredictClient
from yt_viral.controller import PredictionFormController
from yt_viral.schemas import EXAMPLE, FIELD_NAMES
from yt_viral.settings import load_settings
from yt_viral.utils import setup_logging

cli = typer.Typer(help="YouTube Viral Video Predictor CLI")

def _err(msg: str) -> None:
    typer.echo(msg, err=True)

@cli.command(help="Send one video's metadata to the prediction API")
def predict(likes: Optional[str] = typer.Option(None), dislikes: Optional[str] = typer.Option(None),
            comment_count: Optional[str] = typer.Option(None, "--comment-count"),
            title: Optional[str] = typer.Option(None), description: Optional[str] = typer.Option(None),
            tags: Optional[str] = typer.Option(None, help="pipe separated, e.g. tech|review"),
            publish_hour: Optional[str] = typer.Option(None, "--publish-hour", help="0-23"),
            publish_day: Optional[str] = typer.Option(None, "--publish-day", help="0=Mon"),
            prefill: bool = typer.Option(False, "--prefill", help="Start from the built-in example"),
            api_url: Optional[str] = typer.Option(None, "--api-url"),
            timeout: Optional[float] = typer.Option(None, "--timeout"),
            strict: bool = typer.Option(False, "--strict", help="Reject non-numeric values instead of sending null"),
            config: Optional[str] = typer.Option(None, "--config")):
    settings = load_settings(config, api_url=api_url, timeout=timeout,
                             numeric_policy="strict" if strict else None)
    setup_logging(settings.log_level)

    failures = []
    def notify(msg: str) -> None:
        failures.append(msg)
        _err(msg)

    ctl = PredictionFormController(PredictClient(settings.api_url, settings.timeout), notify,
                                   numeric_policy=settings.numeric_policy)
    if prefill:
        ctl.prefill()
    given = dict(likes=likes, dislikes=dislikes, comment_count=comment_count, title=title,
                 description=description, tags=tags, publish_hour=publish_hour, publish_day=publish_day)
    for name in FIELD_NAMES:
        if given[name] is not None:
            ctl.update_field(name, given[name])

    ctl.submit()
    if failures:
        raise typer.Exit(code=1)
    typer.echo(json.dumps({"viral": ctl.result, "badge": ctl.badge.value}, ensure_ascii=False))

@cli.command(help="Print the prefill example")
def example():
    typer.echo(json.dumps(EXAMPLE.as_dict(), indent=2, ensure_ascii=False))

@cli.command(help="Launch the Streamlit page")
def ui(api_url: Optional[str] = typer.Option(None, "--api-url"),
       port: int = typer.Option(8501, "--port"), config: Optional[str] = typer.Option(None, "--config")):
    settings = load_settings(config, api_url=api_url)
    env = os.environ.copy(); env["API_URL"] = settings.api_url
    if config:
        env["YT_VIRAL_CONFIG"] = config
    app_path = Path(__file__).with_name("streamlit_app.py")
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path), "--server.port", str(port)]
    subprocess.run(cmd, env=env, check=True)

if __name__ == "__main__": cli()
