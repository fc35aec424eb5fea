from nagiosrange.error import (
    EmptyRange,
    InvalidRange,
    MalformedEnd,
    MalformedStart,
    MissingColon,
    RangeError,
)


class TestError:
    def test_hierarchy(self):
        for cls in (
            EmptyRange,
            InvalidRange,
            MalformedEnd,
            MalformedStart,
            MissingColon,
        ):
            assert issubclass(cls, RangeError)
        assert issubclass(RangeError, ValueError)

    def test_attributes(self):
        exc = MalformedStart("a:5", "a")
        assert "a:5" == exc.spec
        assert "a" == exc.token

    def test_str_with_token(self):
        assert (
            "the start point could not be parsed as number: 'a' in 'a:5'"
            == str(MalformedStart("a:5", "a"))
        )

    def test_str_without_token(self):
        assert "the range string must not be empty: ''" == str(EmptyRange(""))
        assert (
            "the start point must not be greater than the end point: '4:3'"
            == str(InvalidRange("4:3"))
        )
