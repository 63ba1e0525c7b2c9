"""Application orchestrator."""

import logging

from todostore.config import Settings
from todostore.errors import StoreError
from todostore.log import setup_logging
from todostore.persistence.repository import SqliteTodoRepository
from todostore.screens.base import BACK, HOME_ROUTE, OBJECTDB_ROUTE, QUIT, Screen
from todostore.screens.console import Console
from todostore.screens.objectdb import ObjectDBScreen
from todostore.screens.todo_list import TodoListScreen

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


class Application:
    """Runs the screen navigation stack on top of the configured stores."""

    def __init__(self, settings: Settings, console: Console | None = None) -> None:
        self._settings = settings
        self._console = console or Console()
        self._store: SqliteTodoRepository | None = None
        self._screens: list[Screen] = []

    @property
    def screens(self) -> list[Screen]:
        return list(self._screens)

    @property
    def store(self) -> SqliteTodoRepository:
        if self._store is None:
            raise StoreError("Application not started", code="not_started")
        return self._store

    async def start(self) -> None:
        """Configure logging and open the SQLite store shared by the home screen."""
        setup_logging(
            self._settings.logging.log_dir,
            self._settings.logging.level,
            self._settings.logging.json_format,
            self._settings.logging.console_level,
        )
        logger.info(
            "Starting todostore (backend=%s)",
            self._settings.backend,
            extra={"backend": self._settings.backend},
        )

        self._store = SqliteTodoRepository(self._settings.storage.sqlite_path)
        await self._store.open()

    async def stop(self) -> None:
        """Close every open screen, then the shared store."""
        while self._screens:
            screen = self._screens.pop()
            try:
                await screen.close()
            except StoreError:
                logger.exception("Failed to close screen %s", screen.title)

        if self._store is not None:
            await self._store.close()
            self._store = None
        logger.info("todostore stopped")

    def _create_screen(self, route: str) -> Screen:
        if route == HOME_ROUTE:
            return TodoListScreen(self._console, self.store)
        if route == OBJECTDB_ROUTE:
            return ObjectDBScreen(self._console, self._settings.storage.zodb_path)
        raise ValueError(f"Unknown route '{route}'")

    async def push(self, route: str) -> Screen:
        screen = self._create_screen(route)
        await screen.open()
        self._screens.append(screen)
        logger.debug("Pushed screen %s", screen.title)
        return screen

    async def pop(self) -> None:
        screen = self._screens.pop()
        await screen.close()
        logger.debug("Popped screen %s", screen.title)

    async def dispatch(self, line: str) -> bool:
        """
        Run one command line against the top screen.

        Returns:
            False once the application should exit.
        """
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        if not command:
            return True
        if command in QUIT_COMMANDS:
            return False

        screen = self._screens[-1]
        try:
            result = await screen.handle(command, argument.strip())
        except StoreError as e:
            logger.error("Command '%s' failed: %s", command, e)
            self._console.show(f"Error: {e}")
            return True

        if result == QUIT:
            return False
        if result == BACK:
            await self.pop()
        elif result:
            await self.push(result)
        return bool(self._screens)

    async def run(self) -> None:
        """Start, loop over console input until quit or end of input, stop."""
        await self.start()
        try:
            await self.push(self._settings.backend)
            while self._screens:
                self._console.show(self._screens[-1].render())
                line = self._console.ask("> ")
                if line is None or not await self.dispatch(line):
                    break
        finally:
            await self.stop()
