from __future__ import annotations

import json
import os
from pathlib import Path

import nox

nox.options.default_venv_backend = "uv|virtualenv"
nox.options.reuse_existing_virtualenvs = True

PY311 = "3.11"
PY312 = "3.12"
PY313 = "3.13"
PY_VERSIONS = [PY311, PY312, PY313]
PY_DEFAULT = PY_VERSIONS[0]
PY_LATEST = PY_VERSIONS[-1]

PYDANTIC_MIN = "2.5"
PYDANTIC_LATEST = "latest"
PYDANTIC_VERSIONS = [PYDANTIC_MIN, PYDANTIC_LATEST]


@nox.session
def test(session):
    session.notify(f"tests(python='{PY_DEFAULT}', pydantic='{PYDANTIC_LATEST}')")


@nox.session
@nox.parametrize(
    "python,pydantic",
    [(python, pydantic) for python in PY_VERSIONS for pydantic in PYDANTIC_VERSIONS],
)
def tests(session, pydantic):
    session.install("-e", ".[test]")

    if pydantic == PYDANTIC_MIN:
        session.install(f"pydantic=={PYDANTIC_MIN}.*")

    command = ["pytest"]

    if session.posargs:
        args = []
        for arg in session.posargs:
            if arg:
                args.extend(arg.split(" "))
        command.extend(args)
    session.run(*command)


@nox.session
def lint(session):
    session.run(
        "uv",
        "run",
        "--no-project",
        "--with",
        "pre-commit-uv",
        "--python",
        PY_LATEST,
        "pre-commit",
        "run",
        "--all-files",
        "--show-diff-on-failure",
        "--color",
        "always",
    )


@nox.session
def gha_matrix(session):
    os_args = session.posargs[0] if session.posargs else ""
    os_list = [os.strip() for os in os_args.split(",") if os_args.strip()] or [
        "ubuntu-latest"
    ]

    sessions = session.run("nox", "-l", "--json", external=True, silent=True)
    versions_list = [
        {
            "pydantic-version": session["call_spec"]["pydantic"],
            "python-version": session["python"],
        }
        for session in json.loads(sessions)
        if session["name"] == "tests"
    ]

    include_list = []
    for os_name in os_list:
        for combo in versions_list:
            include_list.append({**combo, "os": os_name})

    matrix = {"include": include_list}

    if os.environ.get("GITHUB_OUTPUT"):
        with Path(os.environ["GITHUB_OUTPUT"]).open("a") as fh:
            print(f"matrix={matrix}", file=fh)
    else:
        print(matrix)
