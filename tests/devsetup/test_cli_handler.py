from pathlib import Path

from common.step_result import SetupReport, StepResult
from devsetup.cli_handler import (
    completion_banner_lines,
    log_setup_summary,
    print_completion_banner,
    view_configuration,
)


def test_completion_banner_lines_defaults(app_settings):
    lines = completion_banner_lines(app_settings)

    assert "🎉 Setup completed successfully!" in lines
    assert "📚 Next steps:" in lines
    assert "   1. Update .env.local with your API keys" in lines
    assert '   2. Run "npm run dev" to start development' in lines
    assert "   3. Load the extension in Chrome from chrome://extensions/" in lines
    assert '   4. Enable "Developer mode" and click "Load unpacked"' in lines
    assert '   5. Select the "build" directory' in lines
    assert "📖 Documentation: ./docs/README.md" in lines
    assert "🐛 Issues: Check the GitHub repository" in lines


def test_completion_banner_follows_configured_paths(app_settings):
    app_settings.env_override = Path("config/.env")
    app_settings.build_dir = Path("dist/chrome")

    lines = completion_banner_lines(app_settings)

    assert "   1. Update config/.env with your API keys" in lines
    assert '   5. Select the "dist/chrome" directory' in lines


def test_print_completion_banner_logs_once(app_settings, mock_logger):
    print_completion_banner(app_settings, mock_logger)

    mock_logger.info.assert_called_once()
    message = mock_logger.info.call_args.args[0]
    assert message == "\n".join(completion_banner_lines(app_settings))


def test_log_setup_summary(app_settings, mock_logger):
    report = SetupReport()
    report.add("Runtime version check", StepResult.success("ok"))
    report.add("Type check", StepResult.warning("failed"))
    report.add("Browser check", StepResult.skipped("skipped"))

    log_setup_summary(report, app_settings, mock_logger)

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert messages == [
        "Setup summary:",
        "   ✅ Runtime version check: success",
        "   ⚠️ Type check: warning",
        "   ⏭️ Browser check: skipped",
    ]


def test_view_configuration(app_settings, mock_logger, tmp_path):
    view_configuration(app_settings, mock_logger)

    text = mock_logger.info.call_args_list[-1].args[0]
    assert "Chrome Extension Starter" in text
    assert "pnpm, npm, yarn" in text
    assert str(tmp_path / ".env.local") in text
    assert "/usr/bin/google-chrome" in text
