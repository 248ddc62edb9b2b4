from __future__ import annotations

from dataclasses import dataclass
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .courses.mysql_course_repository import MySQLCourseRepository
from .courses.repository import CourseRepository
from .courses.service import CourseService
from .database.connection import DBConfig, DatabaseConnection
from .items.mysql_item_repository import MySQLItemRepository
from .items.repository import ItemRepository
from .items.service import ItemService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    items_repo: ItemRepository
    students_repo: StudentRepository
    courses_repo: CourseRepository
    attendance_repo: AttendanceRepository
    users_repo: UserRepository

    token_service: TokenService
    item_service: ItemService
    student_service: StudentService
    course_service: CourseService
    attendance_service: AttendanceService
    auth_service: AuthService
    user_service: UserService


def wire_container(
    *,
    items_repo: ItemRepository,
    students_repo: StudentRepository,
    courses_repo: CourseRepository,
    attendance_repo: AttendanceRepository,
    users_repo: UserRepository,
    secret_key: str,
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""
    token_service = TokenService(secret_key, ttl_hours=token_ttl_hours)
    return Container(
        items_repo=items_repo,
        students_repo=students_repo,
        courses_repo=courses_repo,
        attendance_repo=attendance_repo,
        users_repo=users_repo,
        token_service=token_service,
        item_service=ItemService(items_repo),
        student_service=StudentService(students_repo),
        course_service=CourseService(courses_repo),
        attendance_service=AttendanceService(attendance_repo),
        auth_service=AuthService(users_repo, token_service),
        user_service=UserService(users_repo),
    )


def build_container(*, db_config: dict, secret_key: str, token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        items_repo=MySQLItemRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        courses_repo=MySQLCourseRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        users_repo=MySQLUserRepository(conn),
        secret_key=secret_key,
        token_ttl_hours=token_ttl_hours,
    )
