import logging


class TestRequestLogging:
    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/api/v1/products", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_request_finished_logged_with_status(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/api/v1/products/31337")
        finished = [
            record.getMessage()
            for record in caplog.records
            if "request_finished" in record.getMessage()
        ]
        assert finished
        assert "404" in finished[-1]

    def test_write_operations_are_logged(self, client, caplog):
        payload = {"name": "air", "price": 3000, "discount": 22, "store": "ABC TECH"}
        with caplog.at_level(logging.INFO):
            client.post("/api/v1/products", payload, content_type="application/json")
        assert any("product.added" in record.getMessage() for record in caplog.records)
