"""Diagnostic tool for verifying candle installation and dependencies."""

import sys
from importlib import import_module
from typing import Optional

try:
    from rich.console import Console
    from rich.table import Table

    RICH_AVAILABLE = True
except ImportError:
    RICH_AVAILABLE = False
    Console = None  # type: ignore
    Table = None  # type: ignore


CORE_DEPENDENCIES = [
    ("bs4", "beautifulsoup4"),
    ("soupsieve", "soupsieve"),
    ("html5lib", "html5lib"),
    ("webencodings", "webencodings"),
    ("pydantic", "pydantic"),
    ("rich", "rich"),
]

OPTIONAL_DEPENDENCIES = [
    ("yaml", "pyyaml", True),
]


def check_dependency(
    module_name: str, package_name: Optional[str] = None, optional: bool = False
) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)
        optional: Whether this is an optional dependency

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        if optional:
            return False, f"[WARN] {display_name} (optional - not installed)"
        else:
            return False, f"[MISSING] {display_name}"


def check_tree_builder(name: str = "html5lib") -> tuple[bool, str]:
    """
    Check that BeautifulSoup can find a tree builder.

    Args:
        name: Tree builder feature name, as passed to BeautifulSoup

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        from bs4.builder import builder_registry
    except ImportError:
        return False, f"[FAIL] {name} tree builder - beautifulsoup4 not installed"

    if builder_registry.lookup(name) is None:
        return False, f"[FAIL] {name} tree builder not registered with beautifulsoup4"
    return True, f"[OK] {name} tree builder"


def run_doctor(use_rich: bool = True) -> int:
    """
    Run diagnostic checks and display results.

    Args:
        use_rich: Whether to use rich formatting (if available)

    Returns:
        Exit code (0 if all core dependencies OK, 1 if any core dependency missing)
    """
    use_rich = use_rich and RICH_AVAILABLE

    print("Running candle diagnostics...\n")

    core_results = [check_dependency(mod, pkg) for mod, pkg in CORE_DEPENDENCIES]
    optional_results = [check_dependency(mod, pkg, opt) for mod, pkg, opt in OPTIONAL_DEPENDENCIES]
    system_results = [check_tree_builder()]

    all_checks = {
        "Core Dependencies": core_results,
        "Optional Dependencies": optional_results,
        "System": system_results,
    }

    if use_rich:
        console = Console()

        for category, results in all_checks.items():
            table = Table(title=category, show_header=False, box=None)
            table.add_column("Status", style="bold")

            for success, message in results:
                style = "green" if success else ("yellow" if "optional" in message else "red")
                table.add_row(message, style=style)

            console.print(table)
            console.print()
    else:
        for category, results in all_checks.items():
            print(f"{category}:")
            for _success, message in results:
                print(f"  {message}")
            print()

    core_failed = any(not success for success, _ in core_results + system_results)

    if core_failed:
        print("\nWARNING: Some core dependencies are missing!")
        print("\nRecommended fixes:")
        print("  1. For pipx users: pipx reinstall candle --force")
        print("  2. For pip users: pip install --upgrade --force-reinstall candle")
        print("  3. For development: pip install -e .[dev]")
        return 1

    print("\nAll core dependencies installed correctly!")
    optional_missing = [msg for success, msg in optional_results if not success]
    if optional_missing:
        print("\nOptional features available:")
        print("  - YAML config support: pip install candle[yaml]")

    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
