"""
Unit tests for JobBoardController, HomeController and SavedJobsController.
"""

import asyncio
from typing import List

import pytest

from jobboard.common.error_handling import JobSourceError
from jobboard.common.repositories import SAVED_JOBS_KEY, InMemoryKeyValueStore
from jobboard.common.types import Job
from jobboard.controllers import HomeController, JobBoardController, SavedJobsController, ScreenConfig
from jobboard.controllers.job_board import LOAD_FAILED
from jobboard.services.job_sources import JobSource
from jobboard.services.saved_jobs_service import NOTICE_SAVE_FAILED, NOTICE_SAVED, SavedJobsService


class StaticSource(JobSource):
    """Returns a fixed list, optionally running a hook mid-fetch."""

    def __init__(self, jobs: List[Job], during_fetch=None, error: Exception = None):
        self.jobs = jobs
        self.during_fetch = during_fetch
        self.error = error
        self.calls = 0

    def get_source_name(self) -> str:
        return "static"

    def fetch_jobs(self) -> List[Job]:
        self.calls += 1
        if self.during_fetch:
            self.during_fetch()
        if self.error:
            raise self.error
        return list(self.jobs)


class SlowWriteStore(InMemoryKeyValueStore):
    """Store whose writes yield to the event loop before landing."""

    async def set_item(self, key, value):
        await asyncio.sleep(0.01)
        return await super().set_item(key, value)


@pytest.fixture
def board(sample_jobs, store):
    return JobBoardController(StaticSource(sample_jobs), SavedJobsService(store))


class TestJobBoardController:

    @pytest.mark.asyncio
    async def test_mount_loads_jobs(self, board, sample_jobs):
        await board.mount()

        assert board.is_mounted
        assert board.visible_jobs == sample_jobs
        assert board.error_message is None
        assert board.loading is False

    @pytest.mark.asyncio
    async def test_fetch_failure_shows_empty_list(self, store):
        source = StaticSource([], error=JobSourceError("offline"))
        board = JobBoardController(source, SavedJobsService(store))

        await board.mount()

        assert board.visible_jobs == []
        assert board.error_message == LOAD_FAILED

    @pytest.mark.asyncio
    async def test_result_after_unmount_is_discarded(self, sample_jobs, store):
        board = JobBoardController(StaticSource(sample_jobs), SavedJobsService(store))
        board.source.during_fetch = board.unmount

        await board.mount()

        assert board.jobs == []
        assert board.visible_jobs == []

    @pytest.mark.asyncio
    async def test_criteria_changes_refilter(self, board):
        await board.mount()

        board.set_search_text("acme")
        assert [job.id for job in board.visible_jobs] == ["1", "2"]

        board.set_category("Design")
        assert [job.id for job in board.visible_jobs] == ["2"]

        board.set_category(None)
        board.set_location("Remote")
        board.set_search_text("")
        assert [job.id for job in board.visible_jobs] == ["1", "4"]

        board.set_salary_range(100, 200)
        assert [job.id for job in board.visible_jobs] == ["1"]

        board.clear_filters()
        assert len(board.visible_jobs) == 5

    @pytest.mark.asyncio
    async def test_invalid_salary_range_alerts(self, board):
        await board.mount()

        board.set_salary_range(200, 100)

        assert board.alert
        assert board.criteria.salary_range is None

    @pytest.mark.asyncio
    async def test_toggle_save(self, board, engineer):
        await board.mount()

        await board.toggle_save(engineer)
        assert board.is_saved(engineer)
        assert board.notice == NOTICE_SAVED

        await board.toggle_save(engineer)
        assert not board.is_saved(engineer)

    @pytest.mark.asyncio
    async def test_toggle_save_write_failure_shows_not_saved(self, sample_jobs, failing_store, engineer):
        board = JobBoardController(StaticSource(sample_jobs), SavedJobsService(failing_store))
        await board.mount()

        await board.toggle_save(engineer)

        assert board.saved_jobs == []
        assert not board.is_saved(engineer)
        assert board.notice == NOTICE_SAVE_FAILED

    @pytest.mark.asyncio
    async def test_saved_jobs_loaded_on_mount(self, sample_jobs, store, engineer):
        await SavedJobsService(store).toggle(engineer, [])
        board = JobBoardController(StaticSource(sample_jobs), SavedJobsService(store))

        await board.mount()

        assert board.is_saved(engineer)

    @pytest.mark.asyncio
    async def test_select_and_related(self, board, engineer):
        await board.mount()

        board.select_job(engineer)
        assert board.selected_job == engineer
        assert [job.id for job in board.related_jobs(engineer)] == ["5"]

        board.close_job()
        assert board.selected_job is None


class TestHomeController:

    @pytest.mark.asyncio
    async def test_featured_jobs(self, sample_jobs, store):
        home = HomeController(StaticSource(sample_jobs), SavedJobsService(store))
        await home.mount()

        assert [job.id for job in home.featured_jobs] == ["5"]
        assert home.banner_visible
        home.dismiss_banner()
        assert not home.banner_visible


class TestSavedJobsController:

    @pytest.mark.asyncio
    async def test_unsave(self, store, engineer, designer):
        service = SavedJobsService(store)
        first = await service.toggle(engineer, [])
        await service.toggle(designer, first.saved_jobs)

        screen = SavedJobsController(service)
        await screen.mount()
        assert [job.id for job in screen.saved_jobs] == ["1", "2"]

        await screen.unsave(engineer)
        assert [job.id for job in screen.saved_jobs] == ["2"]
        assert [job.id for job in await service.load()] == ["2"]

    @pytest.mark.asyncio
    async def test_empty(self, store):
        screen = SavedJobsController(SavedJobsService(store))
        await screen.mount()
        assert screen.is_empty


class TestConcurrentToggles:

    @pytest.mark.asyncio
    async def test_overlapping_saves_keep_both_jobs(self, sample_jobs, engineer, designer):
        store = SlowWriteStore()
        board = JobBoardController(StaticSource(sample_jobs), SavedJobsService(store))
        await board.mount()

        await asyncio.gather(board.toggle_save(engineer), board.toggle_save(designer))

        assert [job.id for job in board.saved_jobs] == [engineer.id, designer.id]
        assert [entry["id"] for entry in await store.get_item(SAVED_JOBS_KEY)] == [engineer.id, designer.id]

    @pytest.mark.asyncio
    async def test_overlapping_unsaves(self, engineer, designer):
        store = SlowWriteStore({SAVED_JOBS_KEY: [engineer.to_dict(), designer.to_dict()]})
        screen = SavedJobsController(SavedJobsService(store))
        await screen.mount()

        await asyncio.gather(screen.unsave(engineer), screen.unsave(designer), screen.unsave(engineer))

        assert screen.saved_jobs == []
        assert await store.get_item(SAVED_JOBS_KEY) == []


class TestTransientNotice:

    @pytest.mark.asyncio
    async def test_notice_clears_after_delay(self, sample_jobs, store, engineer):
        board = JobBoardController(
            StaticSource(sample_jobs), SavedJobsService(store), ScreenConfig(notice_seconds=0.01)
        )
        await board.mount()

        await board.toggle_save(engineer)
        assert board.notice == NOTICE_SAVED

        await asyncio.sleep(0.05)
        assert board.notice is None

    @pytest.mark.asyncio
    async def test_failure_notice_clears_after_delay(self, sample_jobs, failing_store, engineer):
        board = JobBoardController(
            StaticSource(sample_jobs), SavedJobsService(failing_store), ScreenConfig(notice_seconds=0.01)
        )
        await board.mount()

        await board.toggle_save(engineer)
        assert board.notice == NOTICE_SAVE_FAILED

        await asyncio.sleep(0.05)
        assert board.notice is None

    @pytest.mark.asyncio
    async def test_newer_notice_gets_full_delay(self, sample_jobs, store):
        board = JobBoardController(
            StaticSource(sample_jobs), SavedJobsService(store), ScreenConfig(notice_seconds=0.05)
        )
        await board.mount()

        board.show_notice("first")
        await asyncio.sleep(0.03)
        board.show_notice("second")
        await asyncio.sleep(0.03)

        assert board.notice == "second"

    @pytest.mark.asyncio
    async def test_unmount_cancels_pending_dismissal(self, sample_jobs, store):
        board = JobBoardController(
            StaticSource(sample_jobs), SavedJobsService(store), ScreenConfig(notice_seconds=0.01)
        )
        await board.mount()
        board.show_notice("Job Saved")

        board.unmount()
        await asyncio.sleep(0.03)

        assert board.notice == "Job Saved"
