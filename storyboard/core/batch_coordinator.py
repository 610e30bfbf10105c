import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from storyboard.core.scene_generator import SceneGenerator
from storyboard.helpers.errors import (
    BatchAlreadyRunningError,
    SceneBusyError,
    SceneGenerationError,
)
from storyboard.models.SessionModel import SessionModel

logger = logging.getLogger(__name__)


class BatchOutcome(str, Enum):
    COMPLETED = "completed"
    STOPPED = "stopped"


@dataclass
class BatchRun:
    attempted: int = 0
    succeeded: int = 0
    failed: int = 0
    outcome: Optional[BatchOutcome] = None


class CancellationToken:
    """Stop request shared between the batch loop and whoever wants to stop it"""

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    def reset(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class BatchCoordinator:
    """
    Generates images for every scene that has none yet, one scene at a time.

    The stop signal is checked only between scenes: a request that is already
    in flight always finishes. Requests are paced by ``delay_seconds`` to
    stay under provider rate limits.
    """

    def __init__(
        self,
        session: SessionModel,
        generator: SceneGenerator,
        delay_seconds: float = 1.0,
        sleep=asyncio.sleep,
    ):
        self.session = session
        self.generator = generator
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self.token = CancellationToken()
        self.running = False
        self.last_run: Optional[BatchRun] = None
        self._task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Schedule a batch on the running loop; rejects a second concurrent batch"""
        if self.running:
            raise BatchAlreadyRunningError("Image generation for all scenes is already running.")

        self.running = True
        self.token.reset()
        self.last_run = BatchRun()
        self._task = asyncio.create_task(self._run_batch(self.last_run))
        self._task.add_done_callback(self._log_failure)
        return self._task

    @staticmethod
    def _log_failure(task: asyncio.Task):
        if not task.cancelled() and task.exception() is not None:
            logger.error("Batch generation aborted", exc_info=task.exception())

    async def run(self) -> BatchRun:
        return await self.start()

    def stop(self):
        if self.running:
            logger.info("Stop requested for batch generation")
        self.token.cancel()

    async def _run_batch(self, run: BatchRun) -> BatchRun:
        try:
            candidates = self.session.pending_scene_ids()
            logger.info(f"Batch generation started for {len(candidates)} scenes")

            for scene_id in candidates:
                if self.token.cancelled:
                    logger.info("Generation stopped by user.")
                    run.outcome = BatchOutcome.STOPPED
                    break

                if self.session.find_scene(scene_id) is None:
                    continue

                try:
                    await self.generator.generate(scene_id)
                except SceneBusyError:
                    # A manual request for this scene is already in flight
                    logger.info(f"Skipping scene {scene_id}, already generating")
                    continue
                except SceneGenerationError as e:
                    run.failed += 1
                    self.session.record_error(e)
                else:
                    run.succeeded += 1
                run.attempted += 1

                await self._sleep(self.delay_seconds)
            else:
                run.outcome = BatchOutcome.COMPLETED

            logger.info(
                f"Batch generation {run.outcome.value}: {run.succeeded} succeeded, "
                f"{run.failed} failed"
            )
            return run
        finally:
            self.running = False
            self.token.reset()
