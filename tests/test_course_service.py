from __future__ import annotations

import pytest
import pytest_asyncio

from core.errors import NotFoundError, StoreFailureError
from courses import schemas, service
from tutors import schemas as tutor_schemas
from tutors import service as tutor_service


@pytest_asyncio.fixture
async def tutor_id(store) -> int:
    tutor = await tutor_service.create_tutor(
        tutor_schemas.NewTutor(tutor_name="Hans", tutor_pic_url="pic.jpg", tutor_profile="AI")
    )
    return tutor.tutor_id


async def _create_course(tutor_id: int, **optional) -> schemas.Course:
    return await service.create_course(
        schemas.CreateCourse(tutor_id=tutor_id, course_name="First course", **optional)
    )


@pytest.mark.asyncio
async def test_create_course_assigns_id_and_posted_time(store, tutor_id):
    course = await _create_course(tutor_id, course_language="English")

    assert course.course_id == 1
    assert course.tutor_id == tutor_id
    assert course.posted_time is not None
    assert course.course_language == "English"
    assert course.course_level is None


@pytest.mark.asyncio
async def test_create_course_for_unknown_tutor_is_store_failure(store):
    with pytest.raises(StoreFailureError):
        await _create_course(404)
    assert store.courses == {}


@pytest.mark.asyncio
async def test_list_courses_for_tutor_without_courses_is_empty(store, tutor_id):
    assert await service.list_courses_for_tutor(tutor_id) == []


@pytest.mark.asyncio
async def test_list_courses_only_returns_that_tutors_courses(store, tutor_id):
    other = await tutor_service.create_tutor(
        tutor_schemas.NewTutor(tutor_name="Eva", tutor_pic_url="e.jpg", tutor_profile="Math")
    )
    mine = await _create_course(tutor_id)
    await _create_course(other.tutor_id)

    assert await service.list_courses_for_tutor(tutor_id) == [mine]


@pytest.mark.asyncio
async def test_course_detail_is_scoped_by_tutor(store, tutor_id):
    course = await _create_course(tutor_id)

    assert await service.get_course_detail(tutor_id, course.course_id) == course
    with pytest.raises(NotFoundError):
        await service.get_course_detail(tutor_id + 1, course.course_id)


@pytest.mark.asyncio
async def test_missing_course_detail_is_not_found(store, tutor_id):
    with pytest.raises(NotFoundError):
        await service.get_course_detail(tutor_id, 999)


@pytest.mark.asyncio
async def test_update_course_keeps_absent_fields(store, tutor_id):
    before = await _create_course(tutor_id, course_description="Intro", course_price=100)

    after = await service.update_course_detail(
        tutor_id,
        before.course_id,
        schemas.UpdateCourse(course_name="Renamed", course_language="German"),
    )

    assert after.course_name == "Renamed"
    assert after.course_language == "German"
    assert after.course_description == "Intro"
    assert after.course_price == 100
    assert after.posted_time == before.posted_time
    assert after.tutor_id == tutor_id


@pytest.mark.asyncio
async def test_update_course_with_empty_string_replaces(store, tutor_id):
    before = await _create_course(tutor_id, course_description="Intro")

    after = await service.update_course_detail(
        tutor_id, before.course_id, schemas.UpdateCourse(course_description="")
    )

    assert after.course_description == ""


@pytest.mark.asyncio
async def test_update_course_wrong_owner_is_not_found(store, tutor_id):
    course = await _create_course(tutor_id)

    with pytest.raises(NotFoundError):
        await service.update_course_detail(
            tutor_id + 1, course.course_id, schemas.UpdateCourse(course_name="X")
        )
    assert store.courses[course.course_id]["course_name"] == "First course"


@pytest.mark.asyncio
async def test_delete_course_and_delete_again(store, tutor_id):
    course = await _create_course(tutor_id)

    first = await service.delete_course(tutor_id, course.course_id)
    second = await service.delete_course(tutor_id, course.course_id)

    assert first.rows_affected == 1
    assert first.message == "Deleted 1 record"
    assert second.rows_affected == 0


@pytest.mark.asyncio
async def test_update_course_reads_and_writes_under_the_row_lock(store, tutor_id, transaction_conn):
    course = await _create_course(tutor_id)

    await service.update_course_detail(tutor_id, course.course_id, schemas.UpdateCourse(course_level="Advanced"))

    assert store.reads == [{"table": "course", "conn": transaction_conn, "for_update": True}]
    assert store.writes == [{"table": "course", "conn": transaction_conn}]


@pytest.mark.asyncio
async def test_missing_course_is_not_written(store, tutor_id):
    with pytest.raises(NotFoundError):
        await service.update_course_detail(tutor_id, 5, schemas.UpdateCourse(course_name="X"))

    assert store.writes == []
