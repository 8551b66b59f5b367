"""
Shared helpers for the test modules.
File: tests/helpers.py
"""

import traceback

from pathlib import Path
from rich.console import Console


console = Console()


def make_vault(root: Path, files: dict) -> Path:
    """
    Populate a vault directory.

    Args:
        root: Directory to fill
        files: Mapping of vault path to text content (None for an empty file)
    """
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content or '', encoding='utf-8')
    return root


def run_test_group(title: str, tests: list) -> int:
    """Run plain test functions outside pytest and print a summary."""
    console.print(f"[cyan]{title}[/cyan]\n")

    passed = 0
    for test_func in tests:
        try:
            test_func()
            console.print(f"  [green]✓ {test_func.__name__}[/green]")
            passed += 1
        except AssertionError as e:
            console.print(f"  [red]✗ {test_func.__name__}: {e or 'assertion failed'}[/red]")
        except Exception as e:
            console.print(f"  [red]✗ {test_func.__name__} crashed: {e}[/red]")
            console.print(f"[dim]{traceback.format_exc()}[/dim]")

    console.print(f"\n[cyan]Results: {passed}/{len(tests)} tests passed[/cyan]")
    return 0 if passed == len(tests) else 1


# End of file #
