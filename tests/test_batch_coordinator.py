import pytest

from conftest import FakeImageClient

from storyboard.core.batch_coordinator import BatchCoordinator, BatchOutcome
from storyboard.core.scene_generator import SceneGenerator
from storyboard.helpers.errors import BatchAlreadyRunningError
from storyboard.helpers.images import to_data_url
from storyboard.schemas.Scene import Scene


def make_scenes(count):
    return [
        Scene(id=f"id-{n}", scene_number=n, script=f"Scene {n}.", prompt=f"prompt-{n};")
        for n in range(1, count + 1)
    ]


class RecordingSleep:
    """Stands in for asyncio.sleep; records pacing delays between requests"""

    def __init__(self, events, on_sleep=None):
        self.events = events
        self.on_sleep = on_sleep

    async def __call__(self, seconds):
        self.events.append(("sleep", seconds))
        if self.on_sleep is not None:
            self.on_sleep()


def build(session, client, events, on_sleep=None):
    generator = SceneGenerator(session, client)
    coordinator = BatchCoordinator(
        session, generator, delay_seconds=1.0, sleep=RecordingSleep(events, on_sleep)
    )
    return coordinator


class TestBatchCoordinator:
    """Tests for the "generate all" loop."""

    @pytest.mark.asyncio
    async def test_generates_all_scenes_in_order_with_pacing(self, session):
        session.scenes = make_scenes(3)
        events = []
        client = FakeImageClient(on_call=lambda prompt: events.append(("call", prompt.split(";")[0])))
        coordinator = build(session, client, events)

        run = await coordinator.run()

        assert events == [
            ("call", "prompt-1"), ("sleep", 1.0),
            ("call", "prompt-2"), ("sleep", 1.0),
            ("call", "prompt-3"), ("sleep", 1.0),
        ]
        assert run.outcome == BatchOutcome.COMPLETED
        assert (run.attempted, run.succeeded, run.failed) == (3, 3, 0)
        assert set(session.results) == {"id-1", "id-2", "id-3"}
        assert coordinator.running is False

    @pytest.mark.asyncio
    async def test_stop_after_k_generations(self, session):
        session.scenes = make_scenes(5)
        events = []
        client = FakeImageClient()
        coordinator = None

        def stop_after_second():
            if len(client.calls) == 2:
                coordinator.stop()

        coordinator = build(session, client, events, on_sleep=stop_after_second)

        run = await coordinator.run()

        assert len(client.calls) == 2
        assert run.outcome == BatchOutcome.STOPPED
        assert set(session.results) == {"id-1", "id-2"}
        assert coordinator.running is False
        assert coordinator.token.cancelled is False

    @pytest.mark.asyncio
    async def test_in_flight_request_finishes_after_stop(self, session):
        session.scenes = make_scenes(3)
        client = FakeImageClient()
        coordinator = None

        def stop_mid_request(prompt):
            coordinator.stop()

        client.on_call = stop_mid_request
        coordinator = build(session, client, [])

        run = await coordinator.run()

        assert len(client.calls) == 1
        assert "id-1" in session.results
        assert run.outcome == BatchOutcome.STOPPED

    @pytest.mark.asyncio
    async def test_skips_scenes_with_results(self, session):
        session.scenes = make_scenes(3)
        session.results["id-2"] = ["existing"]
        client = FakeImageClient()
        coordinator = build(session, client, [])

        run = await coordinator.run()

        prompts = [call["prompt"] for call in client.calls]
        assert len(prompts) == 2
        assert prompts[0].startswith("prompt-1;")
        assert prompts[1].startswith("prompt-3;")
        assert session.results["id-2"] == ["existing"]
        assert run.attempted == 2

    @pytest.mark.asyncio
    async def test_stale_stop_signal_is_cleared_on_start(self, session):
        session.scenes = make_scenes(2)
        client = FakeImageClient()
        coordinator = build(session, client, [])
        coordinator.stop()

        run = await coordinator.run()

        assert run.outcome == BatchOutcome.COMPLETED
        assert len(client.calls) == 2

    @pytest.mark.asyncio
    async def test_failure_does_not_halt_batch(self, two_scene_session):
        events = []
        client = FakeImageClient(images={"scene-a": b"u1"}, fail_on=("scene-b",))
        coordinator = build(two_scene_session, client, events)

        run = await coordinator.run()

        assert two_scene_session.results == {"a": [to_data_url(b"u1")]}
        assert two_scene_session.generating == set()
        assert len(two_scene_session.errors) == 1
        assert "scene 2" in two_scene_session.errors[0].title
        assert "scene 2" in two_scene_session.errors[0].message
        assert run.outcome == BatchOutcome.COMPLETED
        assert (run.attempted, run.succeeded, run.failed) == (2, 1, 1)
        # pacing applies after the failed request too
        assert events.count(("sleep", 1.0)) == 2

    @pytest.mark.asyncio
    async def test_second_batch_is_rejected_while_running(self, session):
        session.scenes = make_scenes(2)
        client = FakeImageClient()
        coordinator = build(session, client, [])

        task = coordinator.start()
        with pytest.raises(BatchAlreadyRunningError):
            coordinator.start()
        run = await task

        assert run.outcome == BatchOutcome.COMPLETED
        assert len(client.calls) == 2

    @pytest.mark.asyncio
    async def test_scene_generating_elsewhere_is_skipped(self, two_scene_session):
        two_scene_session.generating.add("a")
        client = FakeImageClient()
        coordinator = build(two_scene_session, client, [])

        run = await coordinator.run()

        assert len(client.calls) == 1
        assert "scene-b" in client.calls[0]["prompt"]
        assert run.attempted == 1
        assert two_scene_session.errors == []

    @pytest.mark.asyncio
    async def test_empty_store_completes_immediately(self, session):
        coordinator = build(session, FakeImageClient(), [])

        run = await coordinator.run()

        assert run.outcome == BatchOutcome.COMPLETED
        assert run.attempted == 0

    @pytest.mark.asyncio
    async def test_only_current_scene_is_in_flight(self, session):
        session.scenes = make_scenes(4)
        in_flight = []

        def check(prompt):
            in_flight.append(set(session.generating))

        coordinator = BatchCoordinator(
            session, SceneGenerator(session, FakeImageClient(on_call=check)), delay_seconds=0
        )

        await coordinator.run()

        assert in_flight == [{f"id-{n}"} for n in range(1, 5)]
        assert session.generating == set()
