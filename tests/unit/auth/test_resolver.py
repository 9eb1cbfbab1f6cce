"""Tests for per-call security resolution."""

import pytest

from wirk_client.auth.exceptions import MissingSecuritySchemeError, UnsupportedSecuritySchemeError
from wirk_client.auth.resolver import SecurityContribution, SecurityState, resolve_security
from wirk_client.auth.schemes import NO_SECURITY, NoSecurity, api_key, basic, oauth2
from wirk_client.request_config import RequestConfig

SCHEME = "Basicauthentication"


class TestSecurityContribution:
    """Test conversion from schemes to header and query additions."""

    def test_no_security_contributes_nothing(self):
        """Test NoSecurity yields empty mappings."""
        contribution = SecurityContribution.from_scheme(NoSecurity())

        assert dict(contribution.headers) == {}
        assert dict(contribution.query_params) == {}

    def test_api_key_header(self):
        """Test header API key lands in headers."""
        contribution = SecurityContribution.from_scheme(api_key("X-Api-Token", "t", "header"))

        assert contribution.headers == {"X-Api-Token": "t"}
        assert contribution.query_params == {}

    def test_api_key_query(self):
        """Test query API key lands in query parameters."""
        contribution = SecurityContribution.from_scheme(api_key("api_token", "t", "query"))

        assert contribution.headers == {}
        assert contribution.query_params == {"api_token": "t"}

    @pytest.mark.parametrize(
        ("scheme", "expected"),
        [
            (oauth2("abc"), "Bearer abc"),
            (basic("alice", "secret"), "Basic YWxpY2U6c2VjcmV0"),
        ],
    )
    def test_authorization_schemes(self, scheme, expected):
        """Test OAuth2 and basic set the Authorization header verbatim."""
        contribution = SecurityContribution.from_scheme(scheme)

        assert contribution.headers == {"Authorization": expected}


class TestMerge:
    """Test caller entries applied over security entries."""

    def test_caller_header_overrides_security_header(self):
        """Test last-write-wins with the caller winning."""
        contribution = SecurityContribution(headers={"Authorization": "Basic abc"})

        headers, _ = contribution.merge({"Authorization": "Bearer mine"})

        assert headers["Authorization"] == "Bearer mine"
        assert headers.get_list("Authorization") == ["Bearer mine"]

    def test_caller_header_override_is_case_insensitive(self):
        """Test header names are compared case-insensitively."""
        contribution = SecurityContribution(headers={"Authorization": "Basic abc"})

        headers, _ = contribution.merge({"authorization": "Bearer mine"})

        assert headers.get_list("Authorization") == ["Bearer mine"]

    def test_caller_query_overrides_security_query(self):
        """Test query parameters are merged with the caller winning."""
        contribution = SecurityContribution(query_params={"api_token": "secret"})

        _, params = contribution.merge(query_params={"api_token": "mine", "page": "2"})

        assert params == {"api_token": "mine", "page": "2"}

    def test_merge_does_not_mutate_inputs(self):
        """Test neither the contribution nor the caller mappings change."""
        security_headers = {"Authorization": "Basic abc"}
        contribution = SecurityContribution(headers=security_headers, query_params={"k": "v"})
        caller_headers = {"X-Trace": "1"}
        caller_params = {"page": "1"}

        contribution.merge(caller_headers, caller_params)

        assert security_headers == {"Authorization": "Basic abc"}
        assert contribution.query_params == {"k": "v"}
        assert caller_headers == {"X-Trace": "1"}
        assert caller_params == {"page": "1"}

    def test_merge_without_caller_entries(self):
        """Test merge with nothing on top returns the security entries."""
        contribution = SecurityContribution(headers={"X-Api-Token": "t"}, query_params={"q": "1"})

        headers, params = contribution.merge()

        assert headers["X-Api-Token"] == "t"
        assert params == {"q": "1"}


class TestResolveSecurity:
    """Test the resolution order."""

    def test_none_scheme_without_global_security(self):
        """Test _NONE operations with no global credential send nothing."""
        state = SecurityState()

        contribution = resolve_security(None, state.global_security, state.security_configurations, NO_SECURITY)

        assert contribution == SecurityContribution()

    def test_none_scheme_uses_global_security(self):
        """Test _NONE operations use the global credential."""
        state = SecurityState(global_security=basic("alice", "secret"))

        contribution = resolve_security(None, state.global_security, state.security_configurations, NO_SECURITY)

        assert contribution.headers == {"Authorization": "Basic YWxpY2U6c2VjcmV0"}

    def test_none_scheme_ignores_named_configurations(self):
        """Test named configurations do not leak into _NONE operations."""
        state = SecurityState(security_configurations={SCHEME: basic("alice", "secret")})

        contribution = resolve_security(None, state.global_security, state.security_configurations, NO_SECURITY)

        assert contribution.headers == {}

    def test_named_scheme_is_looked_up(self):
        """Test named schemes come from the configurations."""
        state = SecurityState(
            global_security=oauth2("global"),
            security_configurations={SCHEME: basic("alice", "secret")},
        )

        contribution = resolve_security(None, state.global_security, state.security_configurations, SCHEME)

        assert contribution.headers == {"Authorization": "Basic YWxpY2U6c2VjcmV0"}

    def test_named_scheme_missing_raises(self):
        """Test an unconfigured named scheme is a configuration error."""
        state = SecurityState(global_security=oauth2("global"))

        with pytest.raises(MissingSecuritySchemeError) as exc_info:
            resolve_security(None, state.global_security, state.security_configurations, SCHEME)

        assert exc_info.value.scheme_name == SCHEME
        assert SCHEME in str(exc_info.value)

    def test_override_with_scheme_instance(self):
        """Test a scheme instance in the request config wins."""
        state = SecurityState(security_configurations={SCHEME: basic("alice", "secret")})
        config = RequestConfig(security=api_key("api_token", "adhoc", "query"))

        contribution = resolve_security(config, state.global_security, state.security_configurations, SCHEME)

        assert contribution.query_params == {"api_token": "adhoc"}
        assert contribution.headers == {}

    def test_override_with_declared_alternative(self):
        """Test a declared alternative scheme can be selected by name."""
        state = SecurityState(
            global_security=oauth2("global"),
            security_configurations={SCHEME: basic("alice", "secret")},
        )
        config = RequestConfig(security=SCHEME)

        contribution = resolve_security(
            config, state.global_security, state.security_configurations, NO_SECURITY, (SCHEME,)
        )

        assert contribution.headers == {"Authorization": "Basic YWxpY2U6c2VjcmV0"}

    def test_override_with_undeclared_scheme_raises(self):
        """Test an override naming an undeclared scheme is rejected."""
        state = SecurityState(security_configurations={SCHEME: basic("alice", "secret")})
        config = RequestConfig(security=SCHEME)

        with pytest.raises(UnsupportedSecuritySchemeError) as exc_info:
            resolve_security(config, state.global_security, state.security_configurations, NO_SECURITY)

        assert exc_info.value.declared == (NO_SECURITY,)

    def test_override_with_unconfigured_alternative_raises(self):
        """Test selecting a declared but unconfigured scheme raises."""
        state = SecurityState()
        config = RequestConfig(security=SCHEME)

        with pytest.raises(MissingSecuritySchemeError):
            resolve_security(config, state.global_security, state.security_configurations, NO_SECURITY, (SCHEME,))

    def test_resolution_does_not_mutate_state(self):
        """Test resolving never changes the client state."""
        state = SecurityState(
            global_security=oauth2("global"),
            security_configurations={SCHEME: basic("alice", "secret")},
        )
        before = SecurityState(
            global_security=state.global_security,
            security_configurations=dict(state.security_configurations),
        )

        resolve_security(
            RequestConfig(headers={"Authorization": "x"}),
            state.global_security,
            state.security_configurations,
            SCHEME,
        )
        resolve_security(None, state.global_security, state.security_configurations, NO_SECURITY)

        assert state == before
