"""prkeeper entry point.

Runs the webhook server: events from whitelisted repos are accepted, and
closed pull requests get their workspaces and locks cleaned up.
Usage: prkeeper [--config config.yaml] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from prkeeper.adapters import ClientProxy, GitHubAdapter
from prkeeper.config import AppConfig, load_config
from prkeeper.events import PullClosedExecutor
from prkeeper.locking import MemoryLockStore
from prkeeper.logging import PrkeeperLogging
from prkeeper.models import VCSHost
from prkeeper.webhook import run_webhook_server
from prkeeper.workspace import DirectoryWorkspaceManager

LOG = logging.getLogger("prkeeper.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="prkeeper",
        description="prkeeper - repo whitelist and cleanup of closed pull requests",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def build_cleaner(config: AppConfig) -> PullClosedExecutor:
    """Wire the pull cleaner from config."""
    vcs_client = ClientProxy()
    token = config.github_token_resolved
    if token:
        vcs_client.register(VCSHost.GITHUB, GitHubAdapter(token=token, api_url=config.github.api_url))
    else:
        LOG.warning("No GitHub token; cleanup comments cannot be posted")
    return PullClosedExecutor(
        workspace=DirectoryWorkspaceManager(Path(config.bot.data_dir)),
        locker=MemoryLockStore(),
        vcs_client=vcs_client,
    )


def run(config: AppConfig) -> None:
    """Set up logging and serve webhooks until interrupted."""
    PrkeeperLogging(config.logging).setup()
    if not config.bot.repo_whitelist:
        LOG.warning("repo_whitelist is empty; every webhook will be rejected")
    if not config.webhook.enabled:
        LOG.warning("Webhook disabled in config; nothing to do")
        return
    LOG.info("prkeeper started | whitelist=%s | data_dir=%s", config.bot.repo_whitelist, config.bot.data_dir)
    run_webhook_server(config, build_cleaner(config))


def main(argv: list[str] | None = None) -> int:
    """Entry point for prkeeper."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            LOG.warning("config.yaml not found, using config.example.yaml")

    config = load_config(config_path)

    if args.check:
        print("Config OK:", config.bot.repo_whitelist or "(empty whitelist)", config.github.hostname)
        return 0

    try:
        run(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        LOG.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
