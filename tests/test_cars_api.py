"""Integration tests for the /v1/cars catalogue."""

import unittest

from carrental.models import Car, RoleName
from tests.support import ApiTestMixin, token_for


class CarsTestCase(ApiTestMixin, unittest.TestCase):
    def add_cars(self, count: int, size: str = "SMALL") -> None:
        with self.session_factory() as db:
            db.add_all(
                [Car(name=f"Car {i}", price=100000 + i, size=size) for i in range(count)]
            )
            db.commit()

    def admin_headers(self) -> dict[str, str]:
        token = token_for(self.settings, user_id=1, role_name=RoleName.ADMIN)
        return {"Authorization": f"Bearer {token}"}


class TestListCars(CarsTestCase):
    def test_get_all_cars_first_page(self) -> None:
        self.add_cars(7)
        resp = self.client.get("/v1/cars?page=1&pageSize=5")
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(len(body["cars"]), 5)
        self.assertEqual(
            body["meta"]["pagination"],
            {"page": 1, "pageCount": 2, "pageSize": 5, "count": 7},
        )
        self.assertEqual(body["cars"][0]["name"], "Car 0")
        self.assertIn("isCurrentlyRented", body["cars"][0])

    def test_last_page_is_partial(self) -> None:
        self.add_cars(7)
        body = self.client.get("/v1/cars?page=2&pageSize=5").json()
        self.assertEqual([c["name"] for c in body["cars"]], ["Car 5", "Car 6"])

    def test_empty_catalogue(self) -> None:
        body = self.client.get("/v1/cars").json()
        self.assertEqual(body["cars"], [])
        self.assertEqual(body["meta"]["pagination"]["pageCount"], 0)
        self.assertEqual(body["meta"]["pagination"]["pageSize"], 10)

    def test_size_filter(self) -> None:
        self.add_cars(2, size="SMALL")
        self.add_cars(3, size="LARGE")
        body = self.client.get("/v1/cars?size=LARGE").json()
        self.assertEqual(body["meta"]["pagination"]["count"], 3)
        self.assertTrue(all(c["size"] == "LARGE" for c in body["cars"]))

    def test_invalid_paging_is_422(self) -> None:
        self.assertEqual(self.client.get("/v1/cars?page=0").status_code, 422)
        self.assertEqual(self.client.get("/v1/cars?pageSize=0").status_code, 422)
        self.assertEqual(self.client.get("/v1/cars?pageSize=0").json()["detail"][0]["loc"], ["query", "pageSize"])

    def test_oversized_page_size_uses_http_exception_body(self) -> None:
        resp = self.client.get("/v1/cars?pageSize=101")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json(), {"detail": "pageSize must be at most 100."})


class TestCarDetailAndAdmin(CarsTestCase):
    def test_get_missing_car_is_404(self) -> None:
        resp = self.client.get("/v1/cars/123")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"]["details"], {"model": "Car"})

    def test_admin_creates_and_deletes_car(self) -> None:
        resp = self.client.post(
            "/v1/cars",
            json={"name": "Innova", "price": 500000, "size": "LARGE"},
            headers=self.admin_headers(),
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        car_id = resp.json()["id"]
        self.assertFalse(resp.json()["isCurrentlyRented"])

        self.assertEqual(self.client.get(f"/v1/cars/{car_id}").status_code, 200)

        resp = self.client.delete(f"/v1/cars/{car_id}", headers=self.admin_headers())
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.client.get(f"/v1/cars/{car_id}").status_code, 404)

    def test_create_requires_token(self) -> None:
        resp = self.client.post("/v1/cars", json={"name": "X", "price": 1, "size": "SMALL"})
        self.assertEqual(resp.status_code, 401)

    def test_invalid_size_is_422(self) -> None:
        resp = self.client.post(
            "/v1/cars",
            json={"name": "X", "price": 1, "size": "HUGE"},
            headers=self.admin_headers(),
        )
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
