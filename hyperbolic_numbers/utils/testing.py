from .numerical import pairs_close

def assert_same_components(z1, z2):
    assert type(z1.a) == type(z2.a)
    assert type(z1.b) == type(z2.b)

    assert z1.a == z2.a
    assert z1.b == z2.b

def assert_hyperbolic_close(z1, z2, **kwargs):
    assert pairs_close(z1.visualize(), z2.visualize(), **kwargs), (
        "{!r} and {!r} are not close".format(z1, z2)
    )
