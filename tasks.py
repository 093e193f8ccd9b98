"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Context, task


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting and format checks (no fixes) - for CI."""
    ctx.run("ruff check")
    ctx.run("ruff format --check")


@task(name="format")
def format_code(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("ruff check src tests --fix")
    ctx.run("ruff format src tests")


@task(
    name="test",
    help={"docker": "Also run tests that need a Docker daemon"},
)
def run_tests(ctx: Context, docker: bool = False) -> None:
    """Run tests."""
    marker = "" if docker else ' -m "not docker"'
    ctx.run(f"pytest{marker}")
