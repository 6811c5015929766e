class TestMetrics:
    def test_metrics_endpoint_exists(self, client):
        client.get("/")
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert "http_requests_total" in resp.text

    def test_metrics_content(self, client):
        resp = client.get("/metrics")
        assert "http_request_duration_seconds" in resp.text


def test_root(client):
    assert client.get("/").json() == {"message": "Hello from gallerygate!"}
