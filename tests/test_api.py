import pytest
from fastapi.testclient import TestClient

from food_analyzer import services
from food_analyzer.main import app

client = TestClient(app)

IMAGE = "data:image/png;base64,ZmFrZQ=="

ENDPOINTS = [
    "/api/food-analysis/quick-scan",
    "/api/food-analysis/detailed-scan",
    "/api/food-analysis/llava-scan",
]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_quick_scan(fake_replicate):
    fake_replicate(output="Grilled Chicken breast. Roughly 150 grams.")

    response = client.post(ENDPOINTS[0], json={"image": IMAGE, "analysisType": "quick"})

    assert response.status_code == 200
    assert response.json() == {
        "foodName": "Grilled Chicken breast",
        "calories": 165,
        "servingSize": "150 g",
        "confidence": 0.85,
    }


def test_detailed_scan(fake_openai):
    fake_openai(content="# Salad\n- Calories: 120 kcal")

    response = client.post(ENDPOINTS[1], json={"image": IMAGE})

    assert response.status_code == 200
    assert response.json() == {"markdown": "# Salad\n- Calories: 120 kcal", "confidence": 0.95}


def test_llava_scan(fake_replicate):
    fake_replicate(output=["# Soup\n", "## Preparation\nBoiled"])

    response = client.post(ENDPOINTS[2], json={"image": IMAGE})

    assert response.status_code == 200
    assert response.json() == {"markdown": "# Soup\n## Preparation\nBoiled", "confidence": 0.9}


@pytest.mark.parametrize("path", ENDPOINTS)
@pytest.mark.parametrize("body", [{}, {"image": ""}, {"image": None}, {"analysisType": "quick"}])
def test_missing_image_is_400(path, body):
    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Image is required"}


@pytest.mark.parametrize("path", ENDPOINTS)
def test_unparsable_body_is_400(path):
    response = client.post(path, content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.parametrize("path", ENDPOINTS)
@pytest.mark.parametrize("body", [[], [IMAGE], IMAGE, 42])
def test_non_object_json_body_is_400(path, body):
    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Image is required"}


@pytest.mark.parametrize("path", ENDPOINTS)
def test_upstream_failure_is_500(path, fake_replicate, fake_openai):
    fake_replicate(error=ConnectionError("replicate down"))
    fake_openai(error=TimeoutError("openai down"))

    response = client.post(path, json={"image": IMAGE})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze food"}


def test_missing_credentials_is_500(monkeypatch):
    def no_client():
        raise RuntimeError("OPENAI_API_KEY is not set")

    monkeypatch.setattr(services, "_openai_client", no_client)

    response = client.post(ENDPOINTS[1], json={"image": IMAGE})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze food"}


def test_index_page():
    response = client.get("/")
    assert response.status_code == 200
    assert "Food Calorie Analyzer" in response.text
    assert "Utilizing BLIP-2 for rapid recognition" in response.text


def test_scan_page_renders_markdown(fake_openai):
    fake = fake_openai(content="# Pasta\n\n- Calories: 300 kcal")

    response = client.post(
        "/scan",
        data={"analysis_type": "detailed"},
        files={"image": ("meal.jpg", b"fake", "image/jpeg")},
    )

    assert response.status_code == 200
    assert "<h1>Pasta</h1>" in response.text
    assert "<li>Calories: 300 kcal</li>" in response.text
    assert "Powered by GPT-4 Vision" in response.text
    sent = fake.calls[0]["messages"][0]["content"][1]["image_url"]["url"]
    assert sent == "data:image/jpeg;base64,ZmFrZQ=="


def test_scan_page_renders_metrics(fake_replicate):
    fake_replicate(output="A banana.")

    response = client.post(
        "/scan",
        data={"analysis_type": "quick"},
        files={"image": ("meal.png", b"fake", "image/png")},
    )

    assert response.status_code == 200
    assert "A banana" in response.text
    assert "89" in response.text
    assert "Confidence Score: 85%" in response.text


def test_scan_page_without_image():
    response = client.post("/scan", data={"analysis_type": "llava"})
    assert response.status_code == 400
    assert "Image is required" in response.text


def test_scan_page_upstream_failure(fake_replicate):
    fake_replicate(error=ConnectionError("replicate down"))

    response = client.post(
        "/scan",
        data={"analysis_type": "llava"},
        files={"image": ("meal.jpg", b"fake", "image/jpeg")},
    )

    assert response.status_code == 500
    assert "Failed to analyze food" in response.text
