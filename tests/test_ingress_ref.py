import pytest

from cdnorigin.ingress_ref import IngressRef, NamespacedName, new_ingress_ref


def test_name():
    ref = new_ingress_ref("namespace", "name")
    assert ref.name() == "name"


def test_namespace():
    ref = new_ingress_ref("namespace", "name")
    assert ref.namespace() == "namespace"


def test_to_namespaced_name():
    ref = new_ingress_ref("namespace", "name")
    assert ref.to_namespaced_name() == NamespacedName(namespace="namespace", name="name")


def test_ref_is_joined_string():
    ref = new_ingress_ref("bar", "foo")
    assert ref == "bar/foo"
    assert ref == IngressRef("bar/foo")


def test_ref_usable_as_dict_key():
    refs = {IngressRef("foo/bar"): "Synced"}
    assert refs[new_ingress_ref("foo", "bar")] == "Synced"


def test_ref_without_separator_has_no_name():
    with pytest.raises(IndexError):
        IngressRef("lonely").name()