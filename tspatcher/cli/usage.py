"""Usage text for the top-level dispatcher and `help <subcommand>`."""

from __future__ import annotations

PROG = "tspatcher"

_FULL_USAGE = f"""\
Usage:
  {PROG} fetch [--stable | --prerelease | --dev | --branch=<branch>] - clone remote TS repository
  {PROG} patch [--type-depth[=<depth>]] [--package-name=<name>] [--package-make-public] - patch the cloned TS repo
  {PROG} build [--dev] - build the patched TypeScript
  {PROG} publish [--otp=<otp>] - publish the patched TS package to NPM
  {PROG} clean - delete the TypeScript folder
  {PROG} help <subcommand> - show subcommand usage
"""

SUBCOMMAND_USAGE: dict[str, str] = {
    "fetch": f"""\
Subcommand usage:
  {PROG} fetch [--stable | --prerelease | --dev | --branch=<branch>] - clone remote TS repository

Options:
  --stable - clone the latest stable release (default)
  --prerelease - clone the latest release (regardless whether it is stable)
  --dev - clone the latest commit in the main branch
  --branch=<branch> - clone a specific branch or tag of the repository
""",
    "patch": f"""\
Subcommand usage:
  {PROG} patch [--type-depth | --type-depth=<depth>] [--package-name=<name>] [--package-make-public]

Options:
  --type-depth - patches the maximum type instantiation depth, the default is 1000
  --package-name - set the name in package.json; necessary before publishing
  --package-make-public - make the package public to avoid NPM error 402
""",
    "build": f"""\
Subcommand usage:
  {PROG} build [--dev] [--dry-run] - build the patched TypeScript

Options:
  --dev - configure project; necessary for a non-release version
  --dry-run - print the build steps without running them
""",
    "publish": f"""\
Subcommand usage:
  {PROG} publish [--otp=<otp>] [--dry-run] - publish the patched TS package to NPM

Options:
  --otp=<otp> - the one time password for NPM, required for two-factor auth
  --dry-run - print the publish command without running it
""",
    "clean": f"""\
Subcommand usage:
  {PROG} clean - delete the TypeScript folder
""",
}


def full_usage() -> str:
    return _FULL_USAGE


def subcommand_usage(name: str | None) -> str:
    """Usage for one subcommand; the full usage for anything unknown."""
    if name is None:
        return _FULL_USAGE
    return SUBCOMMAND_USAGE.get(name, _FULL_USAGE)
