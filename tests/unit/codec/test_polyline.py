"""
폴리라인 코덱 단위 테스트
"""

import pytest
from hypothesis import given, strategies as st
from saferoute.codec.polyline import decode_polyline, encode_polyline
from saferoute.core.errors import PolylineDecodeError
from saferoute.core.models import Coordinate
from tests.factories import coords

# 알고리즘 문서의 기준 예제
REFERENCE_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


class TestDecodePolyline:
    """디코딩 테스트"""

    def test_reference_example(self):
        decoded = decode_polyline(REFERENCE_ENCODED)
        assert [p.as_tuple() for p in decoded] == REFERENCE_POINTS

    def test_empty_string(self):
        assert decode_polyline("") == []

    @pytest.mark.parametrize("encoded", ["_p~iF", "_p~iF~ps", "_p~iF~ps|U_"])
    def test_truncated_input(self, encoded):
        with pytest.raises(PolylineDecodeError):
            decode_polyline(encoded)

    def test_invalid_character(self):
        with pytest.raises(PolylineDecodeError):
            decode_polyline("_p~iF ps|U")

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_polyline("_")

    def test_precision_six(self):
        encoded = encode_polyline(coords([(23.746123, 90.374211)]), precision=6)
        assert decode_polyline(encoded, precision=6)[0].as_tuple() == (23.746123, 90.374211)


class TestEncodePolyline:
    """인코딩 테스트"""

    def test_reference_example(self):
        assert encode_polyline(coords(REFERENCE_POINTS)) == REFERENCE_ENCODED

    def test_empty(self):
        assert encode_polyline([]) == ""

    @given(st.lists(
        st.tuples(
            st.integers(min_value=-9_000_000, max_value=9_000_000),
            st.integers(min_value=-18_000_000, max_value=18_000_000)
        ),
        max_size=20
    ))
    def test_round_trip_at_five_decimals(self, scaled):
        """1e-5 정밀도 좌표는 인코딩 후 디코딩하면 그대로"""
        points = [Coordinate(lat=lat / 1e5, lng=lng / 1e5) for lat, lng in scaled]
        decoded = decode_polyline(encode_polyline(points))
        assert decoded == points
