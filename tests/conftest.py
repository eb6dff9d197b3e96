from __future__ import annotations

from typing import List, Optional

import pytest


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    def __init__(self, stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
        self._stdout = stdout
        self._stderr = stderr
        self.returncode = returncode

    async def communicate(self):
        return self._stdout, self._stderr


@pytest.fixture
def fake_spawn(monkeypatch):
    """
    Replace asyncio.create_subprocess_exec. Returns a recorder; set
    ``recorder.process`` before the call and read ``recorder.argv`` after.
    """
    import asyncio

    class Recorder:
        process: Optional[FakeProcess] = None
        argv: Optional[List[str]] = None
        calls = 0

    recorder = Recorder()

    async def _spawn(*argv, **kwargs):
        recorder.argv = list(argv)
        recorder.calls += 1
        return recorder.process or FakeProcess()

    monkeypatch.setattr(asyncio, "create_subprocess_exec", _spawn)
    return recorder
