"""Engine lifecycle: initialization, main loop and shutdown."""

from __future__ import annotations

from typing import Optional

from .log import log_error, log_info, log_warning
from .timer import TimerManager
from .timeutils import current_time


class Engine:
    """Owns the engine components and drives the main loop."""

    def __init__(self) -> None:
        self._running = False
        self._initialized = False
        self._timer_manager: Optional[TimerManager] = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Set up the engine components; a second call only warns."""
        if self._initialized:
            log_warning("Engine is already initialized. Skipping initialization.")
            return

        self._initialized = True
        log_info("Engine is initializing...")
        self._initialize_components()
        log_info("Engine initialized successfully.")

    def timer_manager(self) -> TimerManager:
        """Return the timer manager, raising RuntimeError if there is none."""
        if self._timer_manager is None:
            log_error("TimerManager is not initialized. Call Initialize() first.")
            raise RuntimeError("TimerManager is not initialized.")
        return self._timer_manager

    def _initialize_components(self) -> None:
        log_info("Initializing components...")
        self._timer_manager = TimerManager()
        log_info("TimerManager initialized successfully.")
        log_info("All components initialized successfully.")

    def run(self) -> None:
        """Run the main loop until shutdown() is called."""
        if not self._initialized:
            log_error("Engine is not initialized. Call Initialize() first.")
            self.shutdown()
            raise RuntimeError("Engine is not initialized.")

        manager = self.timer_manager()

        log_info("Starting Engine...")
        self._running = True
        log_info("Engine started.")

        log_info("Starting main loop...")
        prev_time = current_time()
        while self._running:
            now = current_time()
            delta_time = now - prev_time
            prev_time = now
            manager.update(delta_time)
        log_info("Main loop ended.")

    def shutdown(self) -> None:
        """Release the components and stop the main loop."""
        log_info("Shutting down Engine...")

        if self._timer_manager is not None:
            self._timer_manager = None
            log_info("TimerManager instance deleted.")

        log_info("Engine shutdown complete.")
        self._running = False