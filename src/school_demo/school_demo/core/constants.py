"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 8
DEFAULT_BACKEND_PORT = 3000
DEFAULT_FRONTEND_PORT = 8080
DEFAULT_PROXY_TIMEOUT = 30

TOKEN_SALT = "school-demo-auth"

WELCOME_ITEM_TEXT = "Bienvenidos a Kubernetes demo"
DEMO_STUDENTS = ("Alumno Demo 1", "Alumno Demo 2", "Alumno Demo 3")
DEMO_COURSES = ("Matemáticas", "Historia")

# (username, password, role); the student account is linked to the first student.
DEMO_USERS = (
    ("admin", "adminpass", "admin"),
    ("prof1", "teacherpass", "teacher"),
    ("student1", "studentpass", "student"),
)
