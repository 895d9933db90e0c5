from cdnorigin.functions import (
    EVENT_TYPE_ORIGIN_REQUEST,
    EVENT_TYPE_ORIGIN_RESPONSE,
    EVENT_TYPE_VIEWER_REQUEST,
    EVENT_TYPE_VIEWER_RESPONSE,
    FunctionAssociations,
    FunctionSpec,
    FunctionType,
    RequestCloudfrontFunction,
    RequestEdgeFunction,
    ResponseCloudfrontFunction,
    ResponseEdgeFunction,
    new_functions,
)


def test_new_functions_all_events():
    fa = FunctionAssociations(
        viewer_request=FunctionSpec("viewer-request-arn", FunctionType.EDGE, include_body=True),
        viewer_response=FunctionSpec("viewer-response-arn", FunctionType.CLOUDFRONT),
        origin_request=FunctionSpec("origin-request-arn", include_body=False),
        origin_response=FunctionSpec("origin-response-arn"),
    )
    expected = [
        RequestEdgeFunction("viewer-request-arn", EVENT_TYPE_VIEWER_REQUEST, True),
        ResponseCloudfrontFunction("viewer-response-arn", EVENT_TYPE_VIEWER_RESPONSE),
        RequestEdgeFunction("origin-request-arn", EVENT_TYPE_ORIGIN_REQUEST, False),
        ResponseEdgeFunction("origin-response-arn", EVENT_TYPE_ORIGIN_RESPONSE),
    ]
    assert new_functions(fa) == expected


def test_new_functions_empty():
    assert new_functions(FunctionAssociations()) == []


def test_viewer_functions_cloudfront_and_edge_types():
    fa = FunctionAssociations(
        viewer_request=FunctionSpec("vr", FunctionType.CLOUDFRONT, include_body=True),
        viewer_response=FunctionSpec("vs", FunctionType.EDGE),
    )
    got = new_functions(fa)
    assert got == [
        RequestCloudfrontFunction("vr", EVENT_TYPE_VIEWER_REQUEST),
        ResponseEdgeFunction("vs", EVENT_TYPE_VIEWER_RESPONSE),
    ]
    assert [f.type for f in got] == [FunctionType.CLOUDFRONT, FunctionType.EDGE]


def test_classes_with_same_fields_differ():
    assert RequestEdgeFunction("a", "x") != ResponseEdgeFunction("a", "x")
    assert RequestEdgeFunction("a", "x").include_body is False