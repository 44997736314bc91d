"""
Browser installer - one-time acquisition of the Chromium binary.

The installer is a small state machine shared by the whole process:

    UNKNOWN --ensure_ready()--> READY

The first caller takes the lock, re-checks the state, and either finds an
existing install in the browsers directory or downloads one. Callers that
arrive while that is running wait on the lock and then see READY. Once READY,
``ensure_ready()`` returns without touching the lock. The lock is a thread
lock, so callers on separate event loops share it too. A failed acquisition
leaves the state UNKNOWN so the next request tries again from scratch.
"""

import asyncio
import os
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable

from reportpdf.config import get_settings
from reportpdf.shared.errors import AcquisitionError
from reportpdf.shared.logging import get_logger

logger = get_logger(__name__)

Downloader = Callable[[Path], Awaitable[None]]

# Checked in order; the first match under the browsers directory is used
EXECUTABLE_NAMES = (
    "chrome.exe",
    "chrome",
    "chromium",
    "Chromium",
    "Google Chrome for Testing",
    "chrome-headless-shell",
    "headless_shell",
)

LOCK_POLL_INTERVAL = 0.01


class AcquisitionState(str, Enum):
    UNKNOWN = "unknown"
    READY = "ready"


async def playwright_download(target: Path) -> None:
    """Download Chromium into ``target`` with the Playwright CLI."""
    target.mkdir(parents=True, exist_ok=True)
    env = {**os.environ, "PLAYWRIGHT_BROWSERS_PATH": str(target)}

    proc = await asyncio.create_subprocess_exec(
        sys.executable, "-m", "playwright", "install", "chromium",
        env=env,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()

    if proc.returncode != 0:
        output = (stderr or stdout).decode(errors="replace").strip()
        raise RuntimeError(
            f"playwright install exited with code {proc.returncode}: {output}"
        )


class BrowserInstaller:
    """Owns the browsers directory and the UNKNOWN/READY acquisition state."""

    def __init__(
        self,
        browsers_path: Path | None = None,
        downloader: Downloader | None = None,
    ) -> None:
        self.browsers_path = browsers_path or get_settings().get_browsers_path()
        self.downloader = downloader or playwright_download
        self._state = AcquisitionState.UNKNOWN
        self._executable: Path | None = None
        # Shared by every event loop and thread in the process
        self._lock = threading.Lock()

    @property
    def state(self) -> AcquisitionState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is AcquisitionState.READY

    @property
    def executable(self) -> Path | None:
        """Browser executable found when the state turned READY."""
        return self._executable

    async def _acquire_lock(self) -> None:
        # Non-blocking attempts keep the loop free and leave nothing holding
        # the lock if the waiting task is cancelled
        while not self._lock.acquire(blocking=False):
            await asyncio.sleep(LOCK_POLL_INTERVAL)

    def has_install(self) -> bool:
        """True when the browsers directory exists and holds at least one file."""
        if not self.browsers_path.is_dir():
            return False
        return any(p.is_file() for p in self.browsers_path.rglob("*"))

    async def ensure_ready(self) -> None:
        """
        Make sure a browser binary is available.

        Idempotent and safe under concurrent first calls: at most one
        download runs. Raises AcquisitionError on failure.
        """
        if self._state is AcquisitionState.READY:
            return

        await self._acquire_lock()
        try:
            if self._state is AcquisitionState.READY:
                return

            try:
                if await asyncio.to_thread(self.has_install):
                    logger.info(f"Chromium already present in {self.browsers_path}")
                else:
                    logger.info(f"Chromium not found, downloading to {self.browsers_path}...")
                    await self.downloader(self.browsers_path)
                    logger.info("Chromium download finished")
                executable = await asyncio.to_thread(self.find_executable)
            except Exception as e:
                logger.error(f"Chromium acquisition failed: {e}")
                raise AcquisitionError(f"browser acquisition failed: {e}", e) from e

            self._executable = executable
            self._state = AcquisitionState.READY
        finally:
            self._lock.release()

    def find_executable(self) -> Path | None:
        """Locate the browser executable, or None to let Playwright resolve it."""
        if not self.browsers_path.is_dir():
            return None
        files = sorted(p for p in self.browsers_path.rglob("*") if p.is_file())
        for name in EXECUTABLE_NAMES:
            for path in files:
                if path.name == name:
                    return path
        return None

    def reset(self) -> None:
        """Forget acquisition state; the next ensure_ready() checks again."""
        self._state = AcquisitionState.UNKNOWN
        self._executable = None


# Process-wide installer
_installer: BrowserInstaller | None = None


def get_installer() -> BrowserInstaller:
    global _installer
    if _installer is None:
        _installer = BrowserInstaller()
    return _installer


def set_installer(installer: BrowserInstaller) -> BrowserInstaller:
    global _installer
    _installer = installer
    return _installer


def reset_installer() -> None:
    global _installer
    _installer = None
