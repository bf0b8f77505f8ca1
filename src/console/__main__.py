"""
Interactive console: read a command per line, execute it against an in-memory model.
Run: python -m console (from repo root, with .env or env vars set).
"""
import logging
import sys

from cohort.application import (
    CommandException,
    FindGroupCommand,
    ListGroupsCommand,
    ListPersonsCommand,
    Model,
)
from cohort.infrastructure import InMemoryModel, load_env_file, load_settings
from console.parser import COMMAND_WORDS, ParseError, parse_command

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit")
PROMPT = "> "


def _format_group(index: int, group) -> str:
    """Format one group as a numbered line with its members."""
    members = ", ".join(p.name for p in group.persons) or "(no members)"
    return f"{index}. {group} | {members}"


def _format_listing(model: Model, command) -> list[str]:
    if isinstance(command, (ListGroupsCommand, FindGroupCommand)):
        return [
            _format_group(i, g) for i, g in enumerate(model.get_filtered_group_list(), start=1)
        ]
    if isinstance(command, ListPersonsCommand):
        return [
            f"{i}. {p.name}" + (f" ({p.phone_number})" if p.phone_number else "")
            for i, p in enumerate(model.get_filtered_person_list(), start=1)
        ]
    return []


def handle_line(model: Model, line: str) -> list[str]:
    """Execute one line of input and return the lines to print."""
    try:
        command = parse_command(line)
    except ParseError as e:
        logger.info("Parse error: %s", e)
        return [str(e), "Commands: " + ", ".join(COMMAND_WORDS)]
    try:
        result = command.execute(model)
    except CommandException as e:
        logger.info("%s rejected (%s): %s", command.COMMAND_WORD, e.kind.value, e.message)
        return [e.message]
    return [result.feedback, *_format_listing(model, command)]


def run(model: Model, stdin=sys.stdin, stdout=sys.stdout) -> None:
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() in EXIT_WORDS:
            break
        if not line.strip():
            continue
        for out in handle_line(model, line):
            stdout.write(out + "\n")


def main() -> None:
    load_env_file()
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level_value,
    )
    logger.info("Console started (default phone region: %s)", settings.default_region)
    run(InMemoryModel(default_region=settings.default_region))


if __name__ == "__main__":
    main()
