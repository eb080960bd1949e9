"""End-to-end tests for the setup entry point."""

import subprocess

import pytest

from devsetup import main_setup
from devsetup.main_setup import SETUP_STEPS, main, parse_args, run_setup

STEP_MODULES = [
    "devsetup.steps.runtime_check",
    "devsetup.steps.package_manager",
    "devsetup.steps.dependencies",
    "devsetup.steps.quality_checks",
]


class FakeToolchain:
    """Stands in for node and the package managers on PATH."""

    def __init__(self, node_version="v20.11.1", missing=("pnpm",), failing=()):
        self.node_version = node_version
        self.missing = set(missing)
        self.failing = set(failing)
        self.commands = []

    def __call__(self, command, *args, **kwargs):
        self.commands.append(list(command))
        if command[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        if command[0] == "node":
            return subprocess.CompletedProcess(
                command, 0, stdout=f"{self.node_version}\n", stderr=""
            )
        if command[-1] in self.failing:
            raise subprocess.CalledProcessError(1, command)
        return subprocess.CompletedProcess(command, 0)


@pytest.fixture
def toolchain(mocker):
    fake = FakeToolchain()
    for module in STEP_MODULES:
        mocker.patch(f"{module}.run_command", side_effect=fake)
        mocker.patch(
            f"{module}.resolve_executable", side_effect=lambda name: name
        )
    return fake


@pytest.fixture
def project(tmp_path, app_settings):
    (tmp_path / ".env.example").write_text("API_KEY=\n")
    app_settings.skip_browser_check = True
    return app_settings


def _info_messages(mock_logger):
    return [call.args[0] for call in mock_logger.info.call_args_list]


def test_steps_run_in_documented_order():
    assert [name for name, _ in SETUP_STEPS] == [
        "Runtime version check",
        "Package manager detection",
        "Environment file",
        "Dependency installation",
        "Build directory",
        "Type check",
        "Linting",
        "Browser check",
    ]


def test_full_setup_with_npm(toolchain, project, tmp_path, mock_logger):
    report = run_setup(project, mock_logger)

    assert report.exit_code == 0
    assert not report.halted
    assert report.get("Package manager detection").value == "npm"
    assert (tmp_path / ".env.local").read_text() == "API_KEY=\n"
    assert (tmp_path / "build").is_dir()
    assert ["npm", "install"] in toolchain.commands
    assert ["npm", "run", "typecheck"] in toolchain.commands
    assert ["npm", "run", "lint"] in toolchain.commands
    assert ["npm", "run", "lint:fix"] not in toolchain.commands

    info = _info_messages(mock_logger)
    assert any("Setup completed successfully!" in msg for msg in info)
    assert any("Setting up Chrome Extension Starter..." in msg for msg in info)


def test_warnings_do_not_fail_setup(toolchain, project, mock_logger):
    toolchain.failing = {"typecheck", "lint", "lint:fix"}

    report = run_setup(project, mock_logger)

    assert report.exit_code == 0
    assert [name for name, _ in report.warnings] == ["Type check", "Linting"]
    assert any(
        "Setup completed successfully!" in msg
        for msg in _info_messages(mock_logger)
    )


def test_old_runtime_halts_before_anything_else(
    toolchain, project, tmp_path, mock_logger
):
    toolchain.node_version = "v16.20.0"

    report = run_setup(project, mock_logger)

    assert report.exit_code == 1
    assert [name for name, _ in report.results] == ["Runtime version check"]
    assert report.get("Runtime version check").message == (
        "Node.js 18.0.0 or higher is required"
    )
    assert not (tmp_path / ".env.local").exists()
    assert not (tmp_path / "build").exists()
    assert all(cmd[0] == "node" for cmd in toolchain.commands)
    assert not any(
        "Setup completed successfully!" in msg
        for msg in _info_messages(mock_logger)
    )


def test_install_failure_halts(toolchain, project, tmp_path, mock_logger):
    toolchain.failing = {"install"}

    report = run_setup(project, mock_logger)

    assert report.exit_code == 1
    assert report.results[-1][0] == "Dependency installation"
    assert (tmp_path / ".env.local").exists()
    assert not (tmp_path / "build").exists()
    error_messages = [call.args[0] for call in mock_logger.error.call_args_list]
    assert any("Setup failed." in msg for msg in error_messages)


def test_no_package_manager_halts(toolchain, project, mock_logger):
    toolchain.missing = {"pnpm", "npm", "yarn"}

    report = run_setup(project, mock_logger)

    assert report.exit_code == 1
    assert report.results[-1][1].message == (
        "No package manager found (pnpm, npm, or yarn required)"
    )


def test_parse_args_defaults():
    args = parse_args([])

    assert args.project_root is None
    assert args.package_managers is None
    assert args.skip_typecheck is None
    assert args.skip_lint is None
    assert args.skip_browser_check is None
    assert args.view_config is False
    assert args.verbose is False


def test_parse_args_repeatable_package_manager():
    args = parse_args(
        ["--package-manager", "yarn", "--package-manager", "npm", "--skip-lint"]
    )

    assert args.package_managers == ["yarn", "npm"]
    assert args.skip_lint is True


@pytest.fixture
def quiet_logging(mocker):
    return mocker.patch("devsetup.main_setup.setup_logging")


def test_main_view_config_does_not_run_steps(quiet_logging, mocker, tmp_path):
    mock_view = mocker.patch("devsetup.main_setup.view_configuration")
    mock_run = mocker.patch("devsetup.main_setup.run_setup")

    assert main(["--project-root", str(tmp_path), "--view-config"]) == 0

    mock_view.assert_called_once()
    mock_run.assert_not_called()


def test_main_returns_report_exit_code(quiet_logging, mocker, tmp_path):
    mock_run = mocker.patch("devsetup.main_setup.run_setup")
    mock_run.return_value.exit_code = 1

    assert main(["--project-root", str(tmp_path)]) == 1

    app_settings = mock_run.call_args.args[0]
    assert app_settings.project_root == tmp_path.resolve()


def test_main_config_error_exit_code(quiet_logging, mocker, tmp_path):
    (tmp_path / "devsetup.yaml").write_text("package_managers: []\n")
    mock_run = mocker.patch("devsetup.main_setup.run_setup")

    assert main(["--project-root", str(tmp_path)]) == 2
    mock_run.assert_not_called()


def test_main_keyboard_interrupt(quiet_logging, mocker, tmp_path):
    mocker.patch(
        "devsetup.main_setup.run_setup", side_effect=KeyboardInterrupt
    )

    assert main(["--project-root", str(tmp_path)]) == 130


def test_main_end_to_end(quiet_logging, toolchain, tmp_path):
    (tmp_path / ".env.example").write_text("API_KEY=\n")

    exit_code = main(["--project-root", str(tmp_path), "--skip-browser-check"])

    assert exit_code == 0
    assert (tmp_path / ".env.local").exists()
    assert (tmp_path / "build").is_dir()
    assert main_setup.module_logger.name == "devsetup"


@pytest.mark.parametrize(
    "flags, expected_format",
    [([], "%(message)s"), (["-v"], None)],
)
def test_main_verbose_uses_symbol_format(
    quiet_logging, mocker, tmp_path, flags, expected_format
):
    mocker.patch("devsetup.main_setup.run_setup").return_value.exit_code = 0

    main(["--project-root", str(tmp_path), *flags])

    final_call = quiet_logging.call_args_list[-1]
    assert final_call.kwargs["log_format_str"] == expected_format
    assert final_call.kwargs["symbols"]["warning"] == "⚠️"
