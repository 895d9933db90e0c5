# cdnorigin

Building blocks for describing CloudFront distributions that serve the
contents of Kubernetes Ingress resources: distributions, origins, cache
behaviors, CloudFront and Lambda@Edge functions, origin access controls
(OAC), ACM certificate discovery, and the `CDNStatus` / `CDNClass`
resource models.

The package has no runtime dependencies. Where AWS is consulted (listing
certificates, listing OACs), you pass in a client object with the expected
methods, so an SDK client or a test double both work.

## Installation

```
pip install .
pip install ".[test]"   # with the test tools
```

## Building a distribution

```python
from cdnorigin.settings import Config
from cdnorigin.origin import OriginBuilder
from cdnorigin.distribution import DistributionBuilder
from cdnorigin.aws_models import distribution_config

cfg = Config(
    default_origin_domain="default.origin.example.com",
    cloudfront_description_template="Serve contents for {{group}} group.",
    cloudfront_price_class="PriceClass_All",
)

api = (
    OriginBuilder("dist", "api.example.com", "Public", cfg)
    .with_behavior("/api/*")
    .with_response_timeout(60)
    .with_origin_headers({"X-Origin": "{{origin.host}}"})
    .build()
)

dist = (
    DistributionBuilder("my-group", cfg)
    .with_origin(api)
    .with_alternate_domains(["www.example.com"])
    .with_tls("arn:aws:acm:us-east-1:000000000000:certificate/placeholder", "TLSv1.2_2021")
    .with_ipv6()
    .build()
)

for behavior in dist.sorted_custom_behaviors():
    print(behavior.path_pattern, behavior.origin_host)

request_body = distribution_config(dist, lambda: "caller-ref", cfg)
```

Each `with_` call on `OriginBuilder` and `DistributionBuilder` returns a new
builder and leaves the old one untouched. `DistributionBuilder.build` raises
`DistributionError` when the same origin host is given twice with different
parameters, or when `with_arn` was given an ARN without a `/<ID>` part.

`cdnorigin.aws_models` turns the models into CloudFront API structures:
`distribution_config`, `origin_config`, `custom_headers` and
`cache_behavior` return plain dictionaries. A behavior whose request policy
is `"None"` gets no `OriginRequestPolicyId`; a response policy is only set
when present and not `"None"`.

## Functions

`new_functions(FunctionAssociations(...))` turns viewer/origin
request/response `FunctionSpec`s into `Function` objects. Viewer events use
a CloudFront Function or Lambda@Edge variant according to
`FunctionSpec.function_type`; origin events are always Lambda@Edge.
`RequestEdgeFunction` carries `include_body`.

## Origin access controls

`new_oac(distribution, origin_name)` derives the desired `OAC`; `oac_name`
keeps the name within the 63-character limit, falling back to a short
hash-based name. Bucket origins built with `OriginBuilder(..., "Bucket", cfg)`
get their OAC automatically, and `Distribution.oacs()` collects them.

`OACLister(client).pages()` yields the pages of
`client.list_origin_access_controls`, following `NextMarker` while the list
is truncated.

## Certificates

`CertificateService(CertificateRepository(acm_client)).discover_by_host(hosts)`
returns the first issued ACM certificate covering every host (by exact name
or one-level `*.` wildcard), or raises `NoMatchingCertificateError`. Lookup
failures raise `CertificateError`. `matching_domain_filter` and
`cert_matches` expose the matching rules.

## Resource models

`CDNStatus` tracks the Ingresses attached to a distribution
(`set_ingress_ref`, `remove_ingress_ref`, `has_ingress_ref`,
`ingress_keys`) and its DNS records (`upsert_dns_records`,
`remove_dns_records`, `set_dns_sync`). Ingress references are `IngressRef`
strings of the form `namespace/name`; `new_ingress_ref` builds one.

`cdn_class_from_manifest` reads a `CDNClass` manifest mapping, checking
`apiVersion`, `kind` and the required spec fields; `CDNClass.to_manifest`
writes it back.

## What this package does not do

It does not watch a cluster or reconcile Ingresses, and it does not create,
update or delete anything on AWS: there is no code here that creates or
deletes distributions or origin access controls, and no helpers for
classifying AWS error codes. It builds the desired state and the request
structures; sending them is left to the caller.

## Tests

```
pytest
```