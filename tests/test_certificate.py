import pytest

from cdnorigin.certificate import (
    Certificate,
    CertificateError,
    CertificateRepository,
    CertificateService,
    NoMatchingCertificateError,
    cert_matches,
    matching_domain_filter,
)


@pytest.mark.parametrize(
    "domain, alternatives, hosts",
    [
        ("foo.com", ["foo.com", "*.foo.com"], ["www.foo.com", "foo.com"]),
        ("foo.com", ["foo.com", "*.foo.com"], ["foo.com", "www.foo.com"]),
        ("foo.com", ["*.foo.com", "foo.com"], ["foo.com", "www.foo.com"]),
        ("bar.com", ["*.foo.com", "bar.com", "*.baz.com"], ["www.foo.com", "bar.com"]),
        ("bar.com", ["baz.com"], ["bar.com", "baz.com"]),
    ],
)
def test_matching_domain_filter_matches(domain, alternatives, hosts):
    cert = Certificate("arn:foo", domain, alternatives)
    assert matching_domain_filter(hosts)(cert) is True


@pytest.mark.parametrize(
    "domain, alternatives, hosts",
    [
        ("bar.com", ["bar.com", "*.bar.com"], ["www.foo.com", "foo.com"]),
        ("*.xpto.com", ["*.xpto.com"], ["www.xpto.com", "xpto.com"]),
    ],
)
def test_matching_domain_filter_does_not_match(domain, alternatives, hosts):
    cert = Certificate("arn:foo", domain, alternatives)
    assert matching_domain_filter(hosts)(cert) is False


def test_cert_matches_wildcard_is_single_level():
    cert = Certificate("arn:foo", "*.foo.com", [])
    assert cert_matches("www.foo.com", cert) is True
    assert cert_matches("a.b.foo.com", cert) is False


class _FakePaginator:
    def __init__(self, pages, error=None):
        self.pages = pages
        self.error = error
        self.kwargs = None

    def paginate(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        yield from self.pages


class _FakeACM:
    def __init__(self, pages, certs, paginate_error=None, describe_error=None):
        self.paginator = _FakePaginator(pages, paginate_error)
        self.certs = certs
        self.describe_error = describe_error

    def get_paginator(self, operation_name):
        assert operation_name == "list_certificates"
        return self.paginator

    def describe_certificate(self, CertificateArn):
        if self.describe_error:
            raise self.describe_error
        return {"Certificate": self.certs[CertificateArn]}


def _client():
    certs = {
        "arn:a": {"CertificateArn": "arn:a", "DomainName": "a.com", "SubjectAlternativeNames": ["*.a.com"]},
        "arn:b": {"CertificateArn": "arn:b", "DomainName": "b.com", "SubjectAlternativeNames": ["*.b.com"]},
    }
    pages = [
        {"CertificateSummaryList": [{"CertificateArn": "arn:a"}]},
        {"CertificateSummaryList": [{"CertificateArn": "arn:b"}]},
    ]
    return _FakeACM(pages, certs)


def test_repository_find_by_filter_returns_matching_and_requests_issued():
    client = _client()
    repo = CertificateRepository(client)
    found = repo.find_by_filter(lambda c: c.domain_name == "b.com")
    assert found == [Certificate("arn:b", "b.com", ("*.b.com",))]
    assert client.paginator.kwargs == {"CertificateStatuses": ["ISSUED"]}


def test_repository_describe_failure_raises():
    client = _client()
    client.describe_error = RuntimeError("boom")
    with pytest.raises(CertificateError, match="describing certificate \\(ARN: arn:a\\)"):
        CertificateRepository(client).find_by_filter(lambda c: True)


def test_repository_list_failure_raises():
    client = _client()
    client.paginator.error = RuntimeError("boom")
    with pytest.raises(CertificateError, match="finding certificate: boom"):
        CertificateRepository(client).find_by_filter(lambda c: True)


def test_service_discovers_first_matching_certificate():
    service = CertificateService(CertificateRepository(_client()))
    cert = service.discover_by_host(["www.a.com", "api.a.com"])
    assert cert.arn == "arn:a"


def test_service_raises_when_nothing_matches():
    service = CertificateService(CertificateRepository(_client()))
    with pytest.raises(NoMatchingCertificateError):
        service.discover_by_host(["www.c.com"])


def test_service_wraps_repository_errors():
    client = _client()
    client.paginator.error = RuntimeError("boom")
    service = CertificateService(CertificateRepository(client))
    with pytest.raises(CertificateError, match="^discovery certificate: "):
        service.discover_by_host(["www.a.com"])