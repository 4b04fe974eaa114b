"""Command-line interface for Scramble Match.

Runs the matching pipeline over WCIF and scramble files, either one command
at a time or in an interactive shell that keeps a session open.
"""

# Scramble Match
# Copyright (C) 2025  Scramble Match developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import shlex
from pathlib import Path
from typing import Any, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from scramblematch import __version__
from scramblematch.constants import DEFAULT_WCIF_FILENAME
from scramblematch.controllers.session import ScrambleSession
from scramblematch.exceptions import (
    FileLoadException,
    FileSaveException,
    ScrambleMatchException,
)
from scramblematch.models.config import MatcherConfig
from scramblematch.utils import set_global_log_level, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Interactive command definitions with their arguments
COMMANDS = {
    "load": {
        "description": "Load a WCIF competition file",
        "options": {"<file>": "WCIF file (JSON)"},
    },
    "upload": {
        "description": "Upload scramble generator output",
        "options": {"<file>...": "Scramble files (JSON), in upload order"},
    },
    "remove": {
        "description": "Remove an uploaded scramble file",
        "options": {"<index>": "Position in the upload list (starting at 1)"},
    },
    "assign": {
        "description": "Assign uploaded scrambles to rounds without scrambles",
        "options": {},
    },
    "clear": {"description": "Remove the scrambles of every round", "options": {}},
    "status": {"description": "Show assignment status", "options": {}},
    "save": {
        "description": "Write the WCIF with assigned scrambles",
        "options": {"<file>": f"Output file (default: {DEFAULT_WCIF_FILENAME})"},
    },
    "results": {
        "description": "Write the results submission file",
        "options": {"<file>": "Output file (default: 'Results for <name>.json')"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


# ========== File helpers ==========


def read_json(path: Path) -> Any:
    """Read a JSON file.

    Raises:
        FileLoadException: If the file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load {path}: {e}") from e


def write_json(path: Path, data: Any, indent: int) -> None:
    """Write ``data`` as JSON.

    Raises:
        FileSaveException: If the file cannot be written
    """
    try:
        path.write_text(json.dumps(data, indent=indent), encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Could not save {path}: {e}") from e
    logger.info(f"Wrote {path}")


def build_session(
    wcif: Path, scrambles: Optional[List[str]], config: Optional[str] = None
) -> ScrambleSession:
    """Create a session with a competition and scramble files loaded."""
    session = ScrambleSession(MatcherConfig.load(config) if config else None)
    session.load_competition(read_json(wcif))
    for path in scrambles or []:
        session.upload(read_json(Path(path)))
    return session


# ========== Output ==========


def print_status(session: ScrambleSession) -> None:
    """Print how many rounds still need scrambles."""
    summary = session.summary()
    print(f"\n{Colors.BOLD}Competition:{Colors.ENDC} {summary['competition']}")
    print(f"  Events: {summary['events']}")
    print(f"  Rounds: {summary['rounds']}")

    uploaded = summary["uploaded_files"]
    print(f"  Uploaded scramble files: {len(uploaded)}")
    for index, name in enumerate(uploaded, start=1):
        print(f"    {index}. {name}")

    missing = summary["unassigned_rounds"]
    if missing:
        print(f"  {Colors.WARNING}Rounds without scrambles: {len(missing)}{Colors.ENDC}")
        for event_id, number in missing:
            print(f"    - {event_id} round {number}")
    else:
        print(f"  {Colors.OKGREEN}Every round has scrambles{Colors.ENDC}")

    unused = {k: v for k, v in summary["unused_scramble_sets"].items() if v}
    if unused:
        print("  Unused uploaded scramble sets:")
        for event_id, count in unused.items():
            print(f"    - {event_id}: {count}")
    print()


def warn_if_incomplete(session: ScrambleSession) -> None:
    missing = session.summary()["unassigned_rounds"]
    if missing:
        print(
            f"{Colors.WARNING}Warning: {len(missing)} rounds have no scrambles{Colors.ENDC}"
        )


# ========== Standard mode commands ==========


def run_assign_command(args: argparse.Namespace) -> int:
    """Assign scrambles and write the WCIF."""
    session = build_session(Path(args.wcif), args.scrambles, args.config)
    if args.clear:
        session.clear()
    session.auto_assign()
    warn_if_incomplete(session)

    output = Path(args.output or args.wcif)
    write_json(output, session.export_wcif(), session.config.output_indent)
    print(f"{Colors.OKGREEN}WCIF saved to: {output}{Colors.ENDC}")
    return 0


def run_clear_command(args: argparse.Namespace) -> int:
    """Clear every round's scrambles and write the WCIF."""
    session = build_session(Path(args.wcif), None, args.config)
    session.clear()

    output = Path(args.output or args.wcif)
    write_json(output, session.export_wcif(), session.config.output_indent)
    print(f"{Colors.OKGREEN}WCIF saved to: {output}{Colors.ENDC}")
    return 0


def run_export_results_command(args: argparse.Namespace) -> int:
    """Write the results submission file, assigning first if scrambles are given."""
    session = build_session(Path(args.wcif), args.scrambles, args.config)
    if args.scrambles:
        session.auto_assign()
    warn_if_incomplete(session)

    output = Path(args.output) if args.output else Path(session.results_file_name())
    write_json(
        output,
        session.export_results(args.program_version),
        session.config.output_indent,
    )
    print(f"{Colors.OKGREEN}Results saved to: {output}{Colors.ENDC}")
    return 0


def run_status_command(args: argparse.Namespace) -> int:
    """Print assignment status."""
    session = build_session(Path(args.wcif), args.scrambles, args.config)
    if args.scrambles:
        session.auto_assign()
    print_status(session)
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="scramblematch",
        description="Match scramble generator output to WCIF competition rounds",
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start the interactive shell"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--wcif", required=True, help="WCIF competition file (JSON)")
    common.add_argument("--config", help="Config file (JSON)")

    assign = subparsers.add_parser(
        "assign", parents=[common], help="Assign scrambles to rounds"
    )
    assign.add_argument(
        "--scrambles", nargs="+", required=True, help="Scramble files, in upload order"
    )
    assign.add_argument("--output", help="Output file (default: overwrite --wcif)")
    assign.add_argument(
        "--clear", action="store_true", help="Clear existing assignments first"
    )
    assign.set_defaults(func=run_assign_command)

    clear = subparsers.add_parser(
        "clear", parents=[common], help="Remove scrambles from every round"
    )
    clear.add_argument("--output", help="Output file (default: overwrite --wcif)")
    clear.set_defaults(func=run_clear_command)

    results = subparsers.add_parser(
        "export-results", parents=[common], help="Write the results submission file"
    )
    results.add_argument("--scrambles", nargs="+", help="Scramble files to assign first")
    results.add_argument("--output", help="Output file")
    results.add_argument(
        "--program-version",
        default=__version__,
        help="Version written to scrambleProgram",
    )
    results.set_defaults(func=run_export_results_command)

    status = subparsers.add_parser(
        "status", parents=[common], help="Show assignment status"
    )
    status.add_argument("--scrambles", nargs="+", help="Scramble files to assign first")
    status.set_defaults(func=run_status_command)

    return parser


# ========== Interactive mode ==========


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     SCRAMBLE MATCH                            ║
║                                                               ║
║             [Scrambles in, competition file out]              ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Arguments:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def execute_interactive_command(
    session: ScrambleSession, command: str, args_list: List[str]
) -> None:
    """Run one interactive command against ``session``.

    Raises:
        ScrambleMatchException: When the pipeline or file access fails
        ValueError: When arguments are missing or malformed
    """
    if command == "load":
        if len(args_list) != 1:
            raise ValueError("usage: load <file>")
        competition = session.load_competition(read_json(Path(args_list[0])))
        print(f"{Colors.OKGREEN}Loaded {competition.name}{Colors.ENDC}")
    elif command == "upload":
        if not args_list:
            raise ValueError("usage: upload <file>...")
        for name in args_list:
            uploaded = session.upload(read_json(Path(name)))
            print(
                f"{Colors.OKGREEN}Uploaded {uploaded.competition_name}: "
                f"{len(uploaded.sheets)} scramble sets{Colors.ENDC}"
            )
    elif command == "remove":
        if len(args_list) != 1 or not args_list[0].isdigit():
            raise ValueError("usage: remove <index>")
        index = int(args_list[0]) - 1
        if not 0 <= index < len(session.uploaded):
            raise ValueError(f"No uploaded file at position {args_list[0]}")
        removed = session.remove_upload(index)
        print(f"{Colors.OKGREEN}Removed {removed.competition_name}{Colors.ENDC}")
    elif command == "assign":
        session.auto_assign()
        print_status(session)
    elif command == "clear":
        session.clear()
        print(f"{Colors.OKGREEN}Cleared all scrambles{Colors.ENDC}")
    elif command == "status":
        print_status(session)
    elif command == "save":
        output = Path(args_list[0] if args_list else DEFAULT_WCIF_FILENAME)
        warn_if_incomplete(session)
        write_json(output, session.export_wcif(), session.config.output_indent)
        print(f"{Colors.OKGREEN}WCIF saved to: {output}{Colors.ENDC}")
    elif command == "results":
        output = Path(args_list[0] if args_list else session.results_file_name())
        warn_if_incomplete(session)
        write_json(
            output, session.export_results(__version__), session.config.output_indent
        )
        print(f"{Colors.OKGREEN}Results saved to: {output}{Colors.ENDC}")
    elif command == "help":
        if args_list:
            print_command_help(args_list[0].lstrip("/"))
        else:
            print_commands_list()


def run_interactive_mode(session: Optional[ScrambleSession] = None) -> int:
    """Run in interactive mode with autocomplete."""
    session = session or ScrambleSession()
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    prompt_session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = prompt_session.prompt("scramblematch> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q", "/exit"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            try:
                parts = shlex.split(user_input)
            except ValueError as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                continue

            # Strip leading "/" if present (support both "/command" and "command")
            command = parts[0].lstrip("/")

            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                execute_interactive_command(session, command, parts[1:])
            except (ScrambleMatchException, ValueError) as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.debug("Command execution failed", exc_info=True)

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


# ========== Entry point ==========


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_global_log_level(logging.DEBUG)

    if args.interactive:
        return run_interactive_mode()

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except ScrambleMatchException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1
