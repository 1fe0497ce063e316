"""Tests for the Starlette adapter."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from skillshandler_core import (
    Skill,
    SkillsEvent,
    SkillsResponse,
    StaticSkillProvider,
    create_skills_handler,
)
from skillshandler_starlette import (
    create_skills_app,
    create_skills_routes,
    to_skills_request,
    to_starlette_response,
)

BASE = "/.well-known/skills"


def _handler(**options):
    provider = StaticSkillProvider(
        [
            Skill(
                "git-workflow",
                "Follow team Git conventions for branching and commits.",
                "# Git Workflow\n\nCreate feature branches from `main`.",
            ),
            Skill(
                "code-review",
                "Review pull requests against the team checklist.",
                "# Code Review",
                files=["SKILL.md", "references/CHECKLIST.md", "notes/my notes.txt"],
            ),
        ],
        files={
            "code-review": {
                "references/CHECKLIST.md": "# Checklist",
                "notes/my notes.txt": "spaced out",
            }
        },
    )
    return create_skills_handler(provider, **options)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_skills_app(_handler()))


class TestCreateSkillsApp:
    def test_index(self, client):
        response = client.get(f"{BASE}/index.json")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert [s["name"] for s in response.json()["skills"]] == ["git-workflow", "code-review"]

    def test_skill_md(self, client):
        response = client.get(f"{BASE}/git-workflow/SKILL.md")
        assert response.status_code == 200
        assert response.headers["content-type"] == "text/markdown; charset=utf-8"
        assert response.text.startswith("---\nname: git-workflow\n")

    def test_supporting_file(self, client):
        response = client.get(f"{BASE}/code-review/references/CHECKLIST.md")
        assert response.status_code == 200
        assert response.text == "# Checklist"

    def test_percent_encoded_file(self, client):
        response = client.get(f"{BASE}/code-review/notes/my%20notes.txt")
        assert response.status_code == 200
        assert response.text == "spaced out"

    @pytest.mark.parametrize("encoded", ["%3F", "%23", "%5B", "%5D"])
    def test_encoded_url_delimiters_are_rejected(self, client, encoded):
        response = client.get(f"{BASE}/code-review/references/CHECKLIST.md{encoded}x")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid file path"}

    def test_percent_is_decoded_once(self, client):
        response = client.get(f"{BASE}/code-review/references/CHECKLIST%252Emd")
        assert response.status_code == 404
        assert response.json() == {"error": "File not found"}

    def test_root_redirect(self, client):
        response = client.get(BASE, follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == f"http://testserver{BASE}/index.json"

    def test_skill_redirect(self, client):
        response = client.get(f"{BASE}/git-workflow", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == f"http://testserver{BASE}/git-workflow/SKILL.md"

    def test_redirect_is_followable(self, client):
        response = client.get(f"{BASE}/git-workflow")
        assert response.status_code == 200
        assert "# Git Workflow" in response.text

    def test_not_found(self, client):
        response = client.get(f"{BASE}/unknown/SKILL.md")
        assert response.status_code == 404
        assert response.json() == {"error": "Skill not found"}

    def test_invalid_name(self, client):
        response = client.get(f"{BASE}/Invalid_Name/SKILL.md")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid skill name"}

    def test_method_not_allowed_comes_from_handler(self, client):
        response = client.post(f"{BASE}/index.json")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

    def test_unlisted_method_gets_json_405(self, client):
        response = client.request("PROPFIND", f"{BASE}/index.json")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight(self, client):
        response = client.options(f"{BASE}/index.json")
        assert response.status_code == 204
        assert response.headers["access-control-allow-methods"] == "GET, HEAD, OPTIONS"
        assert response.content == b""

    def test_head(self, client):
        response = client.head(f"{BASE}/index.json")
        assert response.status_code == 200

    def test_cors_disabled(self):
        client = TestClient(create_skills_app(_handler(cors=False)))
        response = client.get(f"{BASE}/index.json")
        assert "access-control-allow-origin" not in response.headers

    def test_extra_routes_take_precedence(self):
        async def health(request):
            return PlainTextResponse("ok")

        app = create_skills_app(_handler(), routes=[Route("/health", health)])
        client = TestClient(app)
        assert client.get("/health").text == "ok"
        assert client.get(f"{BASE}/index.json").status_code == 200

    def test_events_reach_sink(self):
        events: list[SkillsEvent] = []
        client = TestClient(create_skills_app(_handler(on_event=events.append)))
        client.get(f"{BASE}/index.json")
        assert [e.path for e in events] == [f"{BASE}/index.json"]


class TestCreateSkillsRoutes:
    def test_embedded_in_existing_app(self):
        async def home(request):
            return PlainTextResponse("home")

        app = Starlette(routes=[Route("/", home), *create_skills_routes(_handler())])
        client = TestClient(app)
        assert client.get("/").text == "home"
        assert client.get(f"{BASE}/index.json").status_code == 200
        assert client.get(f"{BASE}/git-workflow/SKILL.md").status_code == 200
        assert client.get(BASE, follow_redirects=False).status_code == 302

    def test_paths_outside_base_are_not_claimed(self):
        app = Starlette(routes=create_skills_routes(_handler()))
        response = TestClient(app).get("/elsewhere")
        assert response.status_code == 404
        assert response.text == "Not Found"

    def test_custom_base_path(self):
        app = Starlette(routes=create_skills_routes(_handler(base_path="/skills/")))
        client = TestClient(app)
        assert client.get("/skills/index.json").status_code == 200
        response = client.get("/skills", follow_redirects=False)
        assert response.headers["location"] == "http://testserver/skills/index.json"


class TestConversion:
    def test_to_starlette_response(self):
        response = to_starlette_response(
            SkillsResponse(200, {"Content-Type": "text/plain", "X-Extra": "1"}, "hi")
        )
        assert response.status_code == 200
        assert response.body == b"hi"
        assert response.headers["content-type"] == "text/plain"
        assert response.headers["x-extra"] == "1"

    def test_empty_body(self):
        response = to_starlette_response(SkillsResponse(302, {"Location": "/x"}))
        assert response.body == b""
        assert response.headers["location"] == "/x"

    def test_to_skills_request_keeps_raw_path(self):
        request = Request(
            {
                "type": "http",
                "method": "GET",
                "scheme": "https",
                "path": "/api/.well-known/skills/a?b",
                "raw_path": b"/.well-known/skills/a%3Fb",
                "root_path": "/api",
                "query_string": b"x=1",
                "headers": [(b"host", b"example.com")],
            }
        )
        skills_request = to_skills_request(request)
        assert skills_request.url == "https://example.com/api/.well-known/skills/a%3Fb?x=1"
        assert skills_request.path == "/api/.well-known/skills/a%3Fb"

    def test_to_skills_request_without_raw_path(self):
        request = Request(
            {
                "type": "http",
                "method": "GET",
                "scheme": "http",
                "path": "/.well-known/skills/my notes.txt",
                "query_string": b"",
                "headers": [(b"host", b"testserver")],
            }
        )
        skills_request = to_skills_request(request)
        assert skills_request.url == "http://testserver/.well-known/skills/my%20notes.txt"
