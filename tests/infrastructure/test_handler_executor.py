"""Tests for SubprocessHandlerExecutor."""

import json
import subprocess

import pytest
from unittest.mock import patch, MagicMock
from vigil.domain.errors import EncodingError, HandlerExecutionError
from vigil.domain.ports.handler_runner_port import HandlerRunnerPort
from vigil.infrastructure.adapters.handler_executor import SubprocessHandlerExecutor


class TestHandlerExecutor:
    def test_is_handler_runner(self):
        assert isinstance(SubprocessHandlerExecutor(), HandlerRunnerPort)

    @pytest.mark.asyncio
    async def test_handler_receives_event_on_stdin(self, make_event, make_script):
        handler = make_script("echo.sh", "cat")
        event = make_event(payload={"version": "1.2.3"})

        output = await SubprocessHandlerExecutor().run(event, handler)

        assert json.loads(output) == event.to_dict()

    @pytest.mark.asyncio
    async def test_stdout_and_stderr_combined(self, make_event, make_script):
        handler = make_script("both.sh", "echo out\necho err 1>&2")

        output = await SubprocessHandlerExecutor().run(make_event(), handler)

        assert b"out" in output
        assert b"err" in output

    @pytest.mark.asyncio
    async def test_non_zero_exit_raises(self, make_event, make_script):
        handler = make_script("fail.sh", "echo broken\nexit 3")

        with pytest.raises(HandlerExecutionError) as excinfo:
            await SubprocessHandlerExecutor().run(make_event(), handler)

        assert excinfo.value.returncode == 3
        assert excinfo.value.handler == handler
        assert b"broken" in excinfo.value.output

    @pytest.mark.asyncio
    async def test_missing_handler_raises(self, make_event, tmp_path):
        with pytest.raises(HandlerExecutionError, match="could not start"):
            await SubprocessHandlerExecutor().run(
                make_event(), str(tmp_path / "does-not-exist")
            )

    @pytest.mark.asyncio
    async def test_timeout_raises(self, make_event, make_script):
        handler = make_script("slow.sh", "exec sleep 5")

        with pytest.raises(HandlerExecutionError, match="timed out"):
            await SubprocessHandlerExecutor(timeout=0.2).run(make_event(), handler)

    @pytest.mark.asyncio
    async def test_encoding_error_skips_launch(self, make_event):
        event = make_event(payload={"bad": object()})
        with patch("subprocess.run") as run:
            with pytest.raises(EncodingError):
                await SubprocessHandlerExecutor().run(event, "/bin/true")
        run.assert_not_called()

    @pytest.mark.asyncio
    async def test_handler_path_not_split(self, make_event):
        mock_result = MagicMock()
        mock_result.returncode = 0
        mock_result.stdout = b"done"

        with patch("subprocess.run", return_value=mock_result) as run:
            output = await SubprocessHandlerExecutor(timeout=None).run(
                make_event(), "/opt/my handlers/notify"
            )

        assert output == b"done"
        args, kwargs = run.call_args
        assert args[0] == ["/opt/my handlers/notify"]
        assert kwargs["stderr"] == subprocess.STDOUT
        assert kwargs["timeout"] is None
