"""Sample cards used to seed an empty library on first run."""

from .models import CardCategory, ReferenceCard

# (title, content, category, is_favorite, tags)
_SAMPLES: list[tuple[str, str, CardCategory, bool, str]] = [
    (
        "iOS Build Flags",
        "-DDEBUG=1\n-DLOG_LEVEL=2\n-fmodules\n-fcxx-modules\n\n"
        "Use for debugging iOS builds in Xcode",
        CardCategory.BUILD_FLAGS,
        True,
        "ios,xcode,debug,build",
    ),
    (
        "Git Reset Commands",
        "git reset --soft HEAD~1  # Keep changes staged\n"
        "git reset --mixed HEAD~1  # Unstage changes\n"
        "git reset --hard HEAD~1   # Discard changes",
        CardCategory.COMMAND_LINE,
        False,
        "git,version-control,reset",
    ),
    (
        "HTTP Status Codes",
        "200 OK - Success\n"
        "201 Created - Resource created\n"
        "400 Bad Request - Invalid request\n"
        "401 Unauthorized - Auth required\n"
        "404 Not Found - Resource missing\n"
        "500 Internal Server Error - Server error",
        CardCategory.ERROR_CODES,
        True,
        "http,api,status,web",
    ),
    (
        "API Authentication Headers",
        "Authorization: Bearer <token>\n"
        "Content-Type: application/json\n"
        "X-API-Key: <key>\n"
        "Accept: application/json\n"
        "User-Agent: VoltCase/1.0",
        CardCategory.API_HEADERS,
        False,
        "api,auth,headers,http",
    ),
    (
        "Docker Commands",
        "docker build -t image:tag .\n"
        "docker run -p 8080:80 image:tag\n"
        "docker ps               # List containers\n"
        "docker stop container_id\n"
        "docker logs container_id",
        CardCategory.COMMAND_LINE,
        True,
        "docker,containers,deployment",
    ),
    (
        "SwiftUI Debugging",
        'print("Debug: \\(value)")\n'
        "lldb: po viewModel.state\n"
        "Xcode: View Hierarchy Debugger\n"
        "Print view body: print(Mirror(reflecting: self).children)",
        CardCategory.TROUBLESHOOTING,
        False,
        "swiftui,debug,xcode,ios",
    ),
    (
        "JSON API Response Format",
        '{\n  "data": { ... },\n  "status": "success",\n'
        '  "message": "Operation completed",\n'
        '  "timestamp": "2025-01-20T10:30:00Z"\n}',
        CardCategory.DOCUMENTATION,
        True,
        "json,api,format,documentation",
    ),
    (
        "Naming Conventions",
        "Variables: camelCase\n"
        "Constants: UPPER_SNAKE_CASE\n"
        "Classes: PascalCase\n"
        "Files: kebab-case.swift\n"
        "APIs: snake_case endpoints",
        CardCategory.NAMING_RULES,
        False,
        "naming,conventions,coding,standards",
    ),
]

SAMPLE_TITLES = [title for title, *_ in _SAMPLES]


def sample_cards() -> list[ReferenceCard]:
    """Build a fresh list of sample cards with new ids and timestamps."""
    return [
        ReferenceCard(
            title=title,
            content=content,
            category=category.label,
            is_favorite=is_favorite,
            tags=tags,
        )
        for title, content, category, is_favorite, tags in _SAMPLES
    ]
