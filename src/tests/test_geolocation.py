import unittest

from helpers.geolocation import (
    ClientCoordinatesProvider, LocationProvider, LocationError, UserLocation,
    DEFAULT_MELBOURNE_LOCATION, DEFAULT_LOCATION_NOTICE, locate_user,
)


class DeniedProvider(LocationProvider):
    def get_current_location(self) -> UserLocation:
        raise LocationError("User denied Geolocation.")


class TestLocateUser(unittest.TestCase):

    def test_reported_coordinates_are_used(self):
        result = locate_user(ClientCoordinatesProvider(lat=-33.8688, lng=151.2093))

        self.assertFalse(result.is_default)
        self.assertIsNone(result.notice)
        self.assertEqual(result.location, UserLocation(lat=-33.8688, lng=151.2093))

    def test_denied_falls_back_to_melbourne(self):
        result = locate_user(DeniedProvider())

        self.assertTrue(result.is_default)
        self.assertEqual((result.location.lat, result.location.lng), (-37.8136, 144.9631))
        self.assertIn("User denied Geolocation.", result.notice)
        self.assertIn(DEFAULT_LOCATION_NOTICE, result.notice)

    def test_missing_coordinates_count_as_denied(self):
        result = locate_user(ClientCoordinatesProvider(lat=None, lng=144.0))

        self.assertTrue(result.is_default)
        self.assertEqual(result.location, DEFAULT_MELBOURNE_LOCATION)

    def test_out_of_range_coordinates_count_as_denied(self):
        result = locate_user(ClientCoordinatesProvider(lat=123.0, lng=10.0))

        self.assertTrue(result.is_default)

    def test_serialized_flag_name(self):
        payload = locate_user(DeniedProvider()).model_dump(by_alias=True)

        self.assertTrue(payload["isDefaultLocation"])


if __name__ == "__main__":
    unittest.main()
