import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from ats_analyzer.api.v1 import analyze as analyze_routes  # noqa: E402
from ats_analyzer.api.v1.analyze import detect_file_kind  # noqa: E402
from ats_analyzer.core import cors, security  # noqa: E402
from ats_analyzer.core.rate_limit import limiter  # noqa: E402
from ats_analyzer.main import app  # noqa: E402
from tests.samples import SAMPLE_JD, SAMPLE_RESUME  # noqa: E402


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resume_text": SAMPLE_RESUME,
            "job_description_text": SAMPLE_JD,
            "custom_keywords": "agile, scrum , ,",
        }

    def setUp(self):
        limiter.reset()

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_analyze_contract_shape(self):
        response = self.client.post("/v1/analyze", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        report = body["report"]
        self.assertIn(report["label"], {"Poor", "Fair", "Good", "Excellent"})
        self.assertIsInstance(report["score"], int)
        self.assertEqual(report["keywords"][:2], ["agile", "scrum"])
        self.assertIn("scrum", report["keyword_match"]["missing"])
        self.assertEqual(report["contact"]["email"], "john.doe@example.com")
        self.assertEqual(report["stats"]["bullet_lines"], 5)
        self.assertEqual(len(body["checklist"]), 6)
        self.assertIsInstance(body["suggestions"], list)
        self.assertEqual(body["breakdown"]["structure"], 30)
        self.assertIn("generated_at", body)

    def test_custom_keywords_accept_a_list(self):
        payload = dict(self.payload, custom_keywords=["Leadership", " "])
        response = self.client.post("/v1/analyze", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["report"]["keywords"][0], "leadership")

    def test_empty_resume_text_is_rejected(self):
        response = self.client.post("/v1/analyze", json={"resume_text": ""})
        self.assertEqual(response.status_code, 422)

    def test_keywords_endpoint(self):
        response = self.client.post(
            "/v1/keywords",
            json={"job_description_text": "React, Node.js, AWS, PostgreSQL"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["keywords"][:4], ["react", "node.js", "aws", "postgresql"])

    def test_upload_plain_text_resume(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"file": ("resume.txt", SAMPLE_RESUME.encode("utf-8"), "text/plain")},
            data={"job_description_text": SAMPLE_JD, "custom_keywords": "agile"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["report"]["keywords"][0], "agile")

    def test_upload_rejects_legacy_doc(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"file": ("resume.doc", b"binary", "application/msword")},
        )
        self.assertEqual(response.status_code, 415)
        self.assertIn(".doc format is not supported", response.json()["detail"])

    def test_upload_rejects_binary_documents(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"file": ("resume.pdf", b"%PDF-1.7", "application/pdf")},
        )
        self.assertEqual(response.status_code, 415)

    def test_upload_rejects_invalid_utf8(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"file": ("resume.txt", b"\xff\xfe\xfa", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)

    def test_api_key_is_enforced_when_configured(self):
        protected = replace(security.settings, api_key="secret-key")
        with patch.object(security, "settings", protected):
            denied = self.client.post("/v1/analyze", json=self.payload)
            allowed = self.client.post("/v1/analyze", json=self.payload, headers={"X-API-Key": "secret-key"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)

    def test_resume_length_follows_configured_limit(self):
        resume = "word " * 12_000
        self.assertGreater(len(resume), 50_000)

        raised = replace(analyze_routes.settings, max_resume_chars=100_000)
        with patch.object(analyze_routes, "settings", raised):
            accepted = self.client.post("/v1/analyze", json={"resume_text": resume})
        self.assertEqual(accepted.status_code, 200)

        lowered = replace(analyze_routes.settings, max_resume_chars=100)
        with patch.object(analyze_routes, "settings", lowered):
            rejected = self.client.post("/v1/analyze", json={"resume_text": resume})
        self.assertEqual(rejected.status_code, 413)

    def test_job_description_length_follows_configured_limit(self):
        lowered = replace(analyze_routes.settings, max_jd_chars=10)
        with patch.object(analyze_routes, "settings", lowered):
            analyze_response = self.client.post("/v1/analyze", json=self.payload)
            keywords_response = self.client.post("/v1/keywords", json={"job_description_text": SAMPLE_JD})
        self.assertEqual(analyze_response.status_code, 413)
        self.assertEqual(keywords_response.status_code, 413)

    def test_cors_options_follow_settings(self):
        configured = replace(cors.settings, cors_allowed_origins=("https://example.com",), cors_allow_origin_regex="  ")
        options = cors.cors_options(configured)
        self.assertEqual(options["allow_origins"], ["https://example.com"])
        self.assertIsNone(options["allow_origin_regex"])
        self.assertEqual(options["allow_methods"], ["GET", "POST"])
        self.assertIn("X-API-Key", options["allow_headers"])

    def test_cors_preflight_allows_api_key_header(self):
        origin = cors.settings.cors_allowed_origins[0]
        response = self.client.options(
            "/v1/analyze",
            headers={
                "Origin": origin,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type,x-api-key",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], origin)

    def test_detect_file_kind(self):
        self.assertEqual(detect_file_kind("CV.PDF", None), "pdf")
        self.assertEqual(
            detect_file_kind("cv", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
            "docx",
        )
        self.assertEqual(detect_file_kind("notes.txt", ""), "txt")
        self.assertEqual(detect_file_kind("old.doc", ""), "doc")
        self.assertEqual(detect_file_kind("image.png", "image/png"), "unknown")


if __name__ == "__main__":
    unittest.main()
