"""Integration tests: services wired over the JSON file backend.

Each container reads the same storage_root, which stands in for an app
restart.
"""

from datetime import UTC, datetime, timedelta

import pytest

from app.core.config import Settings
from app.core.container import build_container
from app.core.lifespan import app_lifespan
from app.domain.enums import TaskPriority, TaskStatus
from app.infrastructure.storage import JsonFileStore
from app.schemas import CreateTaskData, TaskFilters, UpdateTaskData


@pytest.fixture
def file_settings(tmp_path) -> Settings:
    return Settings(
        storage_backend="file",
        storage_root=str(tmp_path / "store"),
        auth_delay_min_seconds=0,
        auth_delay_max_seconds=0,
    )


async def test_tasks_survive_restart(file_settings) -> None:
    first = build_container(file_settings)
    assert isinstance(first.store, JsonFileStore)
    due = datetime.now(UTC) + timedelta(days=1)
    created = await first.task_service.create_task(
        CreateTaskData(title="  Renew passport ", priority=TaskPriority.HIGH, due_date=due)
    )
    await first.task_service.toggle_task_status(created.id)

    second = build_container(file_settings)
    tasks = await second.task_service.get_all_tasks()
    assert len(tasks) == 1
    restored = tasks[0]
    assert restored.id == created.id
    assert restored.title == "Renew passport"
    assert restored.status == TaskStatus.COMPLETED
    assert restored.due_date == due
    assert restored.updated_at > restored.created_at


async def test_session_survives_restart_until_sign_out(file_settings) -> None:
    async with app_lifespan(file_settings) as container:
        user = await container.auth_provider.sign_in_with_google()

    async with app_lifespan(file_settings) as container:
        assert await container.auth_provider.get_current_user() == user
        await container.auth_provider.sign_out()

    async with app_lifespan(file_settings) as container:
        assert await container.auth_provider.is_authenticated() is False


async def test_filters_and_stats_over_file_backend(file_settings) -> None:
    async with app_lifespan(file_settings) as container:
        service = container.task_service
        a = await service.create_task(CreateTaskData(title="Alpha", priority=TaskPriority.LOW))
        await service.create_task(CreateTaskData(title="Beta"))
        await service.update_task(a.id, UpdateTaskData(description="first letter"))

    async with app_lifespan(file_settings) as container:
        service = container.task_service
        found = await service.get_all_tasks(TaskFilters(search="LETTER"))
        assert [t.title for t in found] == ["Alpha"]
        ordered = await service.get_all_tasks(TaskFilters(sort_by="priority", sort_order="desc"))
        assert [t.title for t in ordered] == ["Beta", "Alpha"]
        stats = await service.get_task_stats()
        assert (stats.total, stats.completed, stats.open) == (2, 0, 2)
