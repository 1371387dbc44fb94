"""Command-line front-ends for the three generators.

Usage::

    create-fhevm-example <example-name> <output-path>
    create-fhevm-category <category-name> <output-path>
    generate-fhevm-docs <example-name> [output-dir]
    generate-fhevm-docs --all [output-dir]

    python -m fhevm_hub example fhe-counter ./examples/counter

Every front-end also accepts ``--list`` and ``--help``.  Each invocation ends
in exactly one of: usage, listing, generate-one or generate-all, and returns
the process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
import traceback
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, NoReturn, Optional

from rich.markup import escape

from fhevm_hub.config import HubConfig
from fhevm_hub.docs.generator import DOC_SECTIONS, DocsGenerator
from fhevm_hub.registry.catalog import CATEGORY_REGISTRY, DOC_REGISTRY, EXAMPLE_REGISTRY
from fhevm_hub.registry.models import CategoryConfig, DocTopicConfig, ExampleConfig
from fhevm_hub.registry.registry import Registry
from fhevm_hub.scaffolder.category_gen import CategoryGenerator
from fhevm_hub.scaffolder.example_gen import ExampleGenerator
from fhevm_hub.scaffolder.generator import ScaffoldGenerator, ScaffoldResult
from fhevm_hub.utils import (
    console,
    err_console,
    format_duration,
    print_error,
    print_header,
    print_info,
    print_next_steps,
    print_success,
    print_summary_table,
)


# ---------------------------------------------------------------------------
# Command descriptions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommandSpec:
    """Static description of one generator front-end."""
    prog: str
    title: str
    noun: str
    usage: tuple[str, ...]
    arguments: tuple[tuple[str, str], ...]
    examples: tuple[str, ...]
    describe: Callable[[Any], list[tuple[str, str]]]
    supports_all: bool = False


def _describe_example(config: ExampleConfig) -> list[tuple[str, str]]:
    return [
        ("Title", config.title),
        ("Description", config.description),
        ("Difficulty", config.difficulty.value),
        ("Concepts", ", ".join(config.concepts)),
    ]


def _describe_category(config: CategoryConfig) -> list[tuple[str, str]]:
    return [
        ("Title", config.title),
        ("Description", config.description),
        ("Difficulty", config.difficulty.value),
        ("Examples", ", ".join(config.examples)),
        ("Concepts", ", ".join(config.concepts)),
    ]


def _describe_doc(topic: DocTopicConfig) -> list[tuple[str, str]]:
    return [
        ("Title", topic.title),
        ("Description", topic.description),
        ("Chapter", topic.chapter),
        ("Contract", topic.contract_file),
        ("Test", topic.test_file),
    ]


EXAMPLE_COMMAND = CommandSpec(
    prog="create-fhevm-example",
    title="FHEVM Example Repository Generator",
    noun="example",
    usage=("create-fhevm-example <example-name> <output-path>",),
    arguments=(
        ("<example-name>", "Name of the example to generate"),
        ("<output-path>", "Output directory path"),
    ),
    examples=(
        "create-fhevm-example real-privacy-trading ./examples/trading",
        "create-fhevm-example fhe-counter ./examples/counter",
    ),
    describe=_describe_example,
)

CATEGORY_COMMAND = CommandSpec(
    prog="create-fhevm-category",
    title="FHEVM Category Repository Generator",
    noun="category",
    usage=("create-fhevm-category <category-name> <output-path>",),
    arguments=(
        ("<category-name>", "Name of the category to generate"),
        ("<output-path>", "Output directory path"),
    ),
    examples=(
        "create-fhevm-category trading ./examples/trading",
        "create-fhevm-category basic ./examples/basic",
    ),
    describe=_describe_category,
)

DOCS_COMMAND = CommandSpec(
    prog="generate-fhevm-docs",
    title="FHEVM Documentation Generator",
    noun="example",
    usage=(
        "generate-fhevm-docs <example-name> [output-dir]",
        "generate-fhevm-docs --all [output-dir]",
    ),
    arguments=(
        ("<example-name>", "Name of the example to generate docs for"),
        ("[output-dir]", "Output directory (default: examples)"),
    ),
    examples=(
        "generate-fhevm-docs real-privacy-trading",
        "generate-fhevm-docs --all ./docs/examples",
    ),
    describe=_describe_doc,
    supports_all=True,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Raises on malformed input instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise argparse.ArgumentError(None, message)


def _build_parser(spec: CommandSpec) -> argparse.ArgumentParser:
    # Usage text is printed by ``print_usage``; argparse only tokenises.
    parser = _ArgumentParser(
        prog=spec.prog, add_help=False, allow_abbrev=False, exit_on_error=False
    )
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--list", action="store_true")
    if spec.supports_all:
        parser.add_argument("--all", action="store_true")
    parser.add_argument("positionals", nargs="*")
    return parser


def _parse(spec: CommandSpec, argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    """Split *argv* into known options, positionals and unknown options.

    Raises:
        argparse.ArgumentError: If a known option is malformed
            (``--list=1``, ``-hx``).
    """
    args, extras = _build_parser(spec).parse_known_intermixed_args(list(argv))
    unknown = [arg for arg in extras if arg.startswith("-")]
    args.positionals = list(args.positionals) + [arg for arg in extras if not arg.startswith("-")]
    return args, unknown


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def print_usage(spec: CommandSpec, registry: Registry[Any]) -> None:
    """Print usage text followed by the registry listing."""
    console.print()
    console.print(f"[bold]{escape(spec.title)}[/bold]")
    print_info("=" * len(spec.title))
    console.print()
    console.print("[bold]Usage:[/bold]")
    for line in spec.usage:
        print_info(f"  {line}")
    console.print()
    console.print("[bold]Arguments:[/bold]")
    for argument, help_text in spec.arguments:
        print_info(f"  {argument:<17}{help_text}")
    console.print()
    console.print("[bold]Options:[/bold]")
    if spec.supports_all:
        print_info(f"  {'--all':<17}Generate documentation for all examples")
    print_info(f"  {'--list':<17}List all available {spec.noun} names")
    print_info(f"  {'--help':<17}Show this help message")
    console.print()
    console.print("[bold]Examples:[/bold]")
    for example in spec.examples:
        print_info(f"  {example}")
    print_listing(spec, registry)


def print_listing(spec: CommandSpec, registry: Registry[Any]) -> None:
    """Print every registered key with its descriptive fields."""
    console.print()
    console.print(f"[bold]Available FHEVM {registry.kind} entries:[/bold]")
    console.print()
    for key, config in registry.items():
        console.print(f"  [bold cyan]{escape(key)}[/bold cyan]")
        for label, value in spec.describe(config):
            print_info(f"    {label}: {value}")
        console.print()


def _usage_error(spec: CommandSpec, registry: Registry[Any], message: str) -> int:
    print_error(message)
    print_usage(spec, registry)
    return 1


def _print_failure(headline: str, exc: BaseException) -> None:
    print_error(headline)
    print_error(f"Error: {exc}")
    err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")


# ---------------------------------------------------------------------------
# Generate-one (example / category)
# ---------------------------------------------------------------------------


def _run_scaffold(
    spec: CommandSpec,
    generator: ScaffoldGenerator[Any],
    name: str,
    output_path: str,
) -> int:
    config = generator.config_for(name)
    print_header(f"Generating {config.title} {spec.noun.capitalize()} Repository")
    print_info(f"Output: {output_path}")
    if isinstance(config, CategoryConfig):
        print_info(f"Examples: {', '.join(config.examples)}")
    print_info(f"Concepts: {', '.join(config.concepts)}")
    console.print()

    started = time.monotonic()
    try:
        result: ScaffoldResult = asyncio.run(generator.generate(name, output_path))
    except Exception as exc:
        _print_failure(f"Failed to generate {spec.noun} repository", exc)
        return 1

    console.print()
    print_summary_table(
        {
            "Output": str(result.output_dir),
            "Directories created": str(len(result.created_dirs)),
            "Files written": str(len(result.written)),
        },
        title=config.title,
    )
    print_success(
        f"{spec.noun.capitalize()} repository generated successfully "
        f"in {format_duration(time.monotonic() - started)}"
    )
    console.print()
    print_next_steps(generator.next_steps(output_path))
    return 0


def _run_scaffold_cli(
    spec: CommandSpec,
    argv: Sequence[str],
    make_generator: Callable[[HubConfig], ScaffoldGenerator[Any]],
    registry: Registry[Any],
    hub_config: Optional[HubConfig],
) -> int:
    try:
        args, unknown = _parse(spec, argv)
    except argparse.ArgumentError as exc:
        return _usage_error(spec, registry, f"Invalid arguments: {exc}")

    if not argv or args.help:
        print_usage(spec, registry)
        return 0

    if unknown:
        return _usage_error(spec, registry, f"Unknown option: {' '.join(unknown)}")

    if args.list:
        print_listing(spec, registry)
        return 0

    if len(args.positionals) < 2:
        return _usage_error(spec, registry, "Missing required arguments")
    if len(args.positionals) > 2:
        extra = " ".join(args.positionals[2:])
        return _usage_error(spec, registry, f"Unexpected arguments: {extra}")

    name, output_path = args.positionals[0], args.positionals[1]
    if not registry.validate(name):
        print_error(f"Unknown {spec.noun}: {name}")
        print_listing(spec, registry)
        return 1

    try:
        config = hub_config or HubConfig.resolve()
    except Exception as exc:
        _print_failure("Failed to load hub configuration", exc)
        return 1

    return _run_scaffold(spec, make_generator(config), name, output_path)


def run_example_cli(
    argv: Sequence[str],
    registry: Registry[ExampleConfig] = EXAMPLE_REGISTRY,
    hub_config: Optional[HubConfig] = None,
) -> int:
    """Run ``create-fhevm-example`` with *argv* and return the exit code."""
    return _run_scaffold_cli(
        EXAMPLE_COMMAND,
        argv,
        lambda config: ExampleGenerator(registry, config, progress=print_success),
        registry,
        hub_config,
    )


def run_category_cli(
    argv: Sequence[str],
    registry: Registry[CategoryConfig] = CATEGORY_REGISTRY,
    hub_config: Optional[HubConfig] = None,
) -> int:
    """Run ``create-fhevm-category`` with *argv* and return the exit code."""
    return _run_scaffold_cli(
        CATEGORY_COMMAND,
        argv,
        lambda config: CategoryGenerator(registry, config, progress=print_success),
        registry,
        hub_config,
    )


# ---------------------------------------------------------------------------
# Documentation
# ---------------------------------------------------------------------------


def run_docs_cli(
    argv: Sequence[str],
    registry: Registry[DocTopicConfig] = DOC_REGISTRY,
    hub_config: Optional[HubConfig] = None,
) -> int:
    """Run ``generate-fhevm-docs`` with *argv* and return the exit code."""
    spec = DOCS_COMMAND
    try:
        args, unknown = _parse(spec, argv)
    except argparse.ArgumentError as exc:
        return _usage_error(spec, registry, f"Invalid arguments: {exc}")

    if not argv or args.help:
        print_usage(spec, registry)
        return 0

    if unknown:
        return _usage_error(spec, registry, f"Unknown option: {' '.join(unknown)}")

    if args.list:
        print_listing(spec, registry)
        return 0

    # --all takes [output-dir]; a single topic takes <name> [output-dir]
    allowed = 1 if args.all else 2
    if len(args.positionals) > allowed:
        extra = " ".join(args.positionals[allowed:])
        return _usage_error(spec, registry, f"Unexpected arguments: {extra}")

    if not args.all:
        if not args.positionals:
            return _usage_error(spec, registry, "Missing required arguments")
        name = args.positionals[0]
        if not registry.validate(name):
            print_error(f"Unknown {spec.noun}: {name}")
            print_listing(spec, registry)
            return 1

    try:
        config = hub_config or HubConfig.resolve()
    except Exception as exc:
        _print_failure("Failed to load hub configuration", exc)
        return 1

    generator = DocsGenerator(registry, config, progress=print_success)

    if args.all:
        output_dir = args.positionals[0] if args.positionals else None
        print_header("Generating Documentation for All Examples")
        try:
            result = asyncio.run(generator.generate_all(output_dir))
        except Exception as exc:
            _print_failure("Failed to generate documentation", exc)
            return 1
        console.print()
        print_success(f"Generated {len(result.pages)} pages and index {result.index}")
        return 0

    name = args.positionals[0]
    output_dir = args.positionals[1] if len(args.positionals) > 1 else None
    topic = generator.config_for(name)
    print_header(f"Generating Documentation for {topic.title}")
    print_info(f"Chapter: {topic.chapter}")
    console.print()
    try:
        asyncio.run(generator.generate(name, output_dir))
    except Exception as exc:
        _print_failure("Failed to generate documentation", exc)
        return 1

    console.print()
    console.print("[bold]Generated Sections:[/bold]")
    for section in DOC_SECTIONS:
        print_info(f"   - {section}")
    console.print()
    return 0


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

_COMMANDS: dict[str, Callable[[Sequence[str]], int]] = {
    "example": run_example_cli,
    "category": run_category_cli,
    "docs": run_docs_cli,
}


def main_example() -> None:
    """Console script entry point for ``create-fhevm-example``."""
    sys.exit(run_example_cli(sys.argv[1:]))


def main_category() -> None:
    """Console script entry point for ``create-fhevm-category``."""
    sys.exit(run_category_cli(sys.argv[1:]))


def main_docs() -> None:
    """Console script entry point for ``generate-fhevm-docs``."""
    sys.exit(run_docs_cli(sys.argv[1:]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Dispatch ``python -m fhevm_hub <example|category|docs> ...``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in _COMMANDS:
        print_info("Usage: python -m fhevm_hub <example|category|docs> [args...]")
        print_info(f"Commands: {', '.join(_COMMANDS)}")
        if argv and argv[0] in ("-h", "--help"):
            return 0
        return 1
    return _COMMANDS[argv[0]](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
