from __future__ import annotations

import os
from dataclasses import dataclass

from tagsweep.cli._helpers import exit_on_error
from tagsweep.core.config import CleanupConfig, load_config
from tagsweep.github.client import GitHubClient, RepoApi
from tagsweep.github.http import RealHttpClient
from tagsweep.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: CleanupConfig
    api: RepoApi
    console: ConsoleProtocol


def build_context(*, per_page: int, dry_run: bool) -> CLIContext:
    console = RichConsole()
    config = exit_on_error(load_config(os.environ, per_page=per_page, dry_run=dry_run), console)
    api = GitHubClient(RealHttpClient(token=config.token), api_url=config.api_url)
    return CLIContext(config=config, api=api, console=console)
