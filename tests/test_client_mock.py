"""
Tests for the recording webservice client.
"""

import pytest

from prestashop_webservice_extra import (
    QueryAction,
    RecordedQuery,
    RecordingWebservice,
    WebserviceApiError,
    WebserviceClient,
)


class TestRecordingWebservice:
    """Tests for RecordingWebservice on its own."""

    def test_satisfies_client_protocol(self):
        """Test the recorder is a WebserviceClient."""
        assert isinstance(RecordingWebservice(), WebserviceClient)

    def test_records_calls(self):
        """Test every call is recorded with its action and options."""
        webservice = RecordingWebservice()
        webservice.get({"resource": "products"})
        webservice.delete({"resource": "products", "id": 3})
        assert webservice.calls == [
            RecordedQuery(QueryAction.GET, {"resource": "products"}),
            RecordedQuery(QueryAction.DELETE, {"resource": "products", "id": 3}),
        ]
        assert webservice.last_call.action is QueryAction.DELETE

    def test_default_response_is_none(self):
        """Test calls without a canned response return None."""
        assert RecordingWebservice().edit({"resource": "products"}) is None

    def test_canned_response(self):
        """Test canned responses per action."""
        webservice = RecordingWebservice()
        webservice.set_response("add", {"product": {"id": 12}})
        assert webservice.add({"resource": "products"}) == {"product": {"id": 12}}
        assert webservice.get({"resource": "products"}) is None

    def test_canned_error(self):
        """Test canned errors are raised and the call still recorded."""
        webservice = RecordingWebservice()
        webservice.set_error(QueryAction.GET, WebserviceApiError("Not Found", status_code=404))
        with pytest.raises(WebserviceApiError):
            webservice.get({"resource": "products", "id": 1})
        assert len(webservice.calls) == 1

    def test_clear_canned_error(self):
        """Test passing None removes a canned error."""
        webservice = RecordingWebservice()
        webservice.set_error("get", RuntimeError("down"))
        webservice.set_error("get", None)
        assert webservice.get({"resource": "products"}) is None

    def test_unknown_action(self):
        """Test only the four actions can be configured."""
        with pytest.raises(ValueError):
            RecordingWebservice().set_response("patch", {})

    def test_reset(self):
        """Test reset forgets everything."""
        webservice = RecordingWebservice()
        webservice.set_response("get", 1)
        webservice.set_error("add", RuntimeError())
        webservice.get({})
        webservice.reset()
        assert webservice.calls == []
        assert webservice.last_call is None
        assert webservice.get({}) is None


class TestRecordingWebserviceWithBuilder:
    """Tests for the recorder driven by a query builder."""

    def test_dry_run(self, builder, webservice):
        """Test a built query is recorded instead of sent."""
        webservice.set_response("get", {"customers": [{"id": 1}]})
        result = (
            builder.get("customers")
            .display(["id", "email"])
            .add_ends_by_filter("email", "@example.com")
            .execute_query()
        )
        assert result == {"customers": [{"id": 1}]}
        assert webservice.last_call == RecordedQuery(QueryAction.GET, {
            "resource": "customers",
            "display": "[id,email]",
            "filter[email]": "%[@example.com]",
        })

    def test_error_clears_builder_session(self, builder, webservice):
        """Test a failing dispatch leaves the builder empty."""
        webservice.set_error("delete", WebserviceApiError("Method Not Allowed", status_code=405))
        builder.delete("configurations").id(1)
        with pytest.raises(WebserviceApiError):
            builder.execute_query()
        assert builder.get_query_action() is None
        assert webservice.last_call.options == {"resource": "configurations", "id": 1}
