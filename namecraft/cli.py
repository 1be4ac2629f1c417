"""
Module: cli.py

Author: Michael Economou
Date: 2026-10-16

Command line interface of namecraft.

Subcommands:
    tokens   Show how file names split into tokens and their word classes.
    preview  Show the names a rename method would produce.
    rename   Rename files on disk and print a summary.

Word method example (replace the take number in every file, then add a
suffix to the first word of file 0):

    python -m namecraft rename A_001.mov A_002.mov --method word \\
        --similar --select 0:2 --rule replace=XYZ

Functions:
    main: Parse arguments, run a subcommand and return the exit code.
"""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from namecraft.config import (
    APP_NAME,
    APP_VERSION,
    FILE_SORT_METHODS,
    NUMBERING_SORT_METHODS,
    RENAME_METHODS,
)
from namecraft.core.exceptions import InvalidSelectionError, NamecraftError
from namecraft.core.rename.unified_rename_engine import UnifiedRenameEngine
from namecraft.core.word import EditRule, classify_word, create_word_pattern, tokenize
from namecraft.utils.filesystem.sorting import sort_files
from namecraft.utils.logging.logger_factory import get_cached_logger
from namecraft.utils.logging.logger_setup import ConfigureLogger
from namecraft.utils.shared.json_config_manager import (
    JSONConfigManager,
    create_app_config_manager,
    get_user_config_dir,
)

logger = get_cached_logger(__name__)

# argparse destination -> RenameConfig key, for options remembered between runs
REMEMBERED_OPTIONS = {
    "method": "method",
    "pattern": "pattern",
    "date_format": "date_format",
    "start": "numbering_start",
    "step": "numbering_step",
    "padding": "numbering_padding",
    "numbering_sort": "numbering_sort",
    "reverse": "numbering_reverse",
    "case_sensitive": "case_sensitive",
    "expression": "expression",
    "similar": "apply_similar_pattern",
    "similar_only": "use_similar_pattern_filter",
    "group": "treat_selection_as_one",
}


def parse_selection(text: str) -> tuple[int, int, int]:
    """Parse ``FILE:WORD`` or ``FILE:START-END`` into (file, start, end)."""
    file_part, sep, word_part = text.partition(":")
    start_part, _, end_part = word_part.partition("-")
    try:
        if not sep:
            raise ValueError(text)
        file_index = int(file_part)
        start = int(start_part)
        end = int(end_part) if end_part else start
    except ValueError:
        raise InvalidSelectionError(
            f"Invalid selection {text!r}: expected FILE:WORD or FILE:START-END"
        ) from None
    return file_index, start, end


def parse_rule(text: str) -> EditRule:
    """Parse ``ACTION[=VALUE]``, e.g. ``replace=final`` or ``remove``."""
    action, _, value = text.partition("=")
    return EditRule.from_dict({"action": action, "value": value})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME, description="Batch file renaming with word-level editing"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    parser.add_argument(
        "--log-file", action="store_true", help="Also write a log file in the config directory"
    )
    parser.add_argument("--config-dir", help="Directory holding config.json")

    subparsers = parser.add_subparsers(dest="command", required=True)

    tokens_parser = subparsers.add_parser("tokens", help="Show the tokens of file names")
    tokens_parser.add_argument("names", nargs="+", help="File names or paths")

    for name, help_text in (
        ("preview", "Show the new names without renaming"),
        ("rename", "Rename the files on disk"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_rename_arguments(sub)
        if name == "rename":
            sub.add_argument(
                "--save-options",
                action="store_true",
                help="Remember the method and its options as defaults",
            )

    return parser


def _add_rename_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="+", help="Files to rename")
    parser.add_argument("--method", choices=RENAME_METHODS, help="Rename method")
    parser.add_argument("--order", choices=FILE_SORT_METHODS, help="Sort the file list first")

    pattern_group = parser.add_argument_group("pattern and numbering")
    pattern_group.add_argument("--pattern", help="Name template, e.g. {name}_{num}")
    pattern_group.add_argument("--date-format", help="Format of {date}, e.g. YYYY-MM-DD")
    pattern_group.add_argument("--start", type=int, help="First number")
    pattern_group.add_argument("--step", type=int, help="Number increment")
    pattern_group.add_argument("--padding", type=int, help="Digits of the number")
    pattern_group.add_argument(
        "--numbering-sort", choices=NUMBERING_SORT_METHODS, help="Numbering order"
    )
    pattern_group.add_argument(
        "--reverse", action=argparse.BooleanOptionalAction, help="Reverse numbering order"
    )

    replace_group = parser.add_argument_group("find and replace")
    replace_group.add_argument("--find", default="", help="Text to find")
    replace_group.add_argument("--replace", default="", help="Replacement text")
    replace_group.add_argument("--case-sensitive", action=argparse.BooleanOptionalAction)

    regex_group = parser.add_argument_group("regular expression")
    regex_group.add_argument("--regex", default="", help="Regular expression")
    regex_group.add_argument("--replacement", default="", help="Replacement ($1 or \\1 groups)")

    expression_group = parser.add_argument_group("expression")
    expression_group.add_argument("--expression", help="Python expression building the name")

    word_group = parser.add_argument_group("word")
    word_group.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="FILE:WORD",
        help="Select token WORD of file FILE (FILE:START-END selects a range)",
    )
    word_group.add_argument(
        "--word",
        action="append",
        default=[],
        metavar="TEXT",
        help="Edit every token equal to TEXT in all files",
    )
    word_group.add_argument(
        "--rule",
        action="append",
        default=[],
        metavar="ACTION[=VALUE]",
        help="replace=VALUE, remove, prefix=VALUE or suffix=VALUE",
    )
    word_group.add_argument(
        "--similar",
        action=argparse.BooleanOptionalAction,
        help="Also select matching tokens in other files",
    )
    word_group.add_argument(
        "--similar-only",
        action=argparse.BooleanOptionalAction,
        help="With --word, skip files shaped unlike the selected file",
    )
    word_group.add_argument(
        "--group",
        action=argparse.BooleanOptionalAction,
        help="Edit range selections as one word",
    )


def load_config(config_dir: str | None) -> JSONConfigManager:
    manager = create_app_config_manager(config_dir=config_dir)
    manager.load()
    return manager


def remembered_option(args: argparse.Namespace, rename_config: Any, dest: str) -> Any:
    """Value of option ``dest``, or the saved one when it was not given."""
    value = getattr(args, dest)
    if value is None:
        return rename_config.get(REMEMBERED_OPTIONS[dest])
    return value


def method_options(args: argparse.Namespace, manager: JSONConfigManager) -> tuple[str, dict]:
    """Resolve the method and its options; unset options fall back to the saved config."""
    rename_config = manager.get_category("rename", create_if_not_exists=True)

    def option(dest: str) -> Any:
        return remembered_option(args, rename_config, dest)

    method = option("method")
    if method == "numbering":
        pattern = args.pattern or rename_config.get("numbering_pattern")
    else:
        pattern = option("pattern")

    data = {
        "pattern": pattern,
        "date_format": option("date_format"),
        "start": option("start"),
        "step": option("step"),
        "padding": option("padding"),
        "sort": option("numbering_sort"),
        "reverse": option("reverse"),
        "find": args.find,
        "replace": args.replace,
        "case_sensitive": option("case_sensitive"),
        "replacement": args.replacement,
        "expression": option("expression"),
        "apply_similar_pattern": option("similar"),
        "use_similar_pattern_filter": option("similar_only"),
        "treat_selection_as_one": option("group"),
    }
    if method == "regex":
        data["pattern"] = args.regex
    return method, data


def save_options(manager: JSONConfigManager, method: str, data: dict) -> None:
    rename_config = manager.get_category("rename", create_if_not_exists=True)
    rename_config.set("method", method)
    if method == "numbering":
        rename_config.update(
            {
                "numbering_pattern": data["pattern"],
                "numbering_start": data["start"],
                "numbering_step": data["step"],
                "numbering_padding": data["padding"],
                "numbering_sort": data["sort"],
                "numbering_reverse": data["reverse"],
            }
        )
    elif method == "pattern":
        rename_config.update({"pattern": data["pattern"], "date_format": data["date_format"]})
    elif method == "replace":
        rename_config.set("case_sensitive", data["case_sensitive"])
    elif method == "expression":
        rename_config.set("expression", data["expression"])
    elif method == "word":
        rename_config.update(
            {
                "apply_similar_pattern": data["apply_similar_pattern"],
                "use_similar_pattern_filter": data["use_similar_pattern_filter"],
                "treat_selection_as_one": data["treat_selection_as_one"],
            }
        )
    manager.save()


def configure_word_session(
    engine: UnifiedRenameEngine, args: argparse.Namespace, data: dict
) -> None:
    """Apply the --select/--word/--rule options to the engine's word session."""
    session = engine.session
    session.apply_similar_pattern = bool(data["apply_similar_pattern"])
    session.use_similar_pattern_filter = bool(data["use_similar_pattern_filter"])
    session.treat_selection_as_one = bool(data["treat_selection_as_one"])
    session.set_rules(parse_rule(text) for text in args.rule)

    for text in args.select:
        file_index, start, end = parse_selection(text)
        tokens = session.tokens_for(file_index)
        for word_index in (start, end):
            if not 0 <= word_index < len(tokens):
                raise InvalidSelectionError(f"No token {word_index} in file {file_index}")
        if tokens[start].is_separator:
            raise InvalidSelectionError(
                f"Token {start} of file {file_index} is a separator ({tokens[start].text!r})"
            )

        if not session.is_token_selected(file_index, start):
            session.toggle_token(file_index, start)
        if end != start:
            session.last_selected = next(
                token
                for token in session.selected_tokens
                if token.file_index == file_index and token.word_index == start
            )
            session.select_range(file_index, end)

    if args.word:
        session.set_apply_to_all(True)
        known = {pattern.word for pattern in session.word_patterns}
        for word in args.word:
            if word and word not in known:
                session.word_patterns.append(create_word_pattern(word))
                known.add(word)


def run_tokens(args: argparse.Namespace) -> int:
    for name in args.names:
        base_name = os.path.basename(name)
        print(base_name)
        for index, token in enumerate(tokenize(base_name)):
            print(f"  {index:>3}  {token.text!r:<20} {classify_word(token.text).value}")
    return 0


def _prepare_engine(args: argparse.Namespace, method: str, data: dict) -> UnifiedRenameEngine:
    files = [os.path.abspath(path) for path in args.files]
    if args.order:
        files = sort_files(files, args.order)
    engine = UnifiedRenameEngine(files)
    if method == "word" or args.select or args.word:
        configure_word_session(engine, args, data)
    return engine


def run_preview(args: argparse.Namespace, manager: JSONConfigManager) -> int:
    method, data = method_options(args, manager)
    engine = _prepare_engine(args, method, data)
    preview = engine.generate_preview(method, data)
    validation = engine.validate_preview()

    for item in validation.items:
        marker = "  " if item.is_unchanged else "->"
        print(f"{item.old_name} {marker} {item.new_name}")
        if item.error_message:
            print(f"    ! {item.error_message}")
    for error in preview.errors:
        print(f"error: {error}", file=sys.stderr)

    return 1 if validation.has_errors else 0


def run_rename(args: argparse.Namespace, manager: JSONConfigManager) -> int:
    method, data = method_options(args, manager)
    engine = _prepare_engine(args, method, data)
    result = engine.rename(method, data)

    for item in result.items:
        if item.success and not item.skip_reason:
            print(f"{os.path.basename(item.old_path)} -> {os.path.basename(item.new_path)}")
        elif not item.success:
            print(f"Failed: {item.old_path}: {item.error_message}", file=sys.stderr)

    summary = engine.summarize(result)
    print(summary.message)

    if args.save_options:
        save_options(manager, method, data)

    return 1 if summary.error_count else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config_dir = args.config_dir or get_user_config_dir()
    ConfigureLogger(
        log_name=APP_NAME,
        log_dir=os.path.join(config_dir, "logs"),
        file_enabled=args.log_file,
        debug_enabled=False,
        console_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        if args.command == "tokens":
            return run_tokens(args)

        manager = load_config(args.config_dir)
        if args.command == "preview":
            return run_preview(args, manager)
        return run_rename(args, manager)
    except NamecraftError as e:
        logger.debug("[CLI] %s", e, extra={"dev_only": True})
        print(f"error: {e}", file=sys.stderr)
        return 2
