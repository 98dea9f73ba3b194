import os
import random

from locust import HttpUser, between, task

HEADERS = {"Authorization": f"Bearer {os.getenv('API_TOKEN', '')}"}


class CatalogReader(HttpUser):
    wait_time = between(1, 2)

    def _check_page(self, url):
        with self.client.get(url, headers=HEADERS, catch_response=True, name=url.split("?")[0]) as response:
            if response.status_code != 200:
                response.failure(f"Status {response.status_code}: {response.text}")
                return
            try:
                data = response.json()
            except ValueError as e:
                response.failure(f"Invalid JSON: {e}")
                return
            if isinstance(data.get("data"), list) and "totalPages" in data:
                response.success()
            else:
                response.failure("Response is not a paginated list.")

    @task(3)
    def list_categories(self):
        self._check_page(f"/api/categories/get?page={random.randint(1, 3)}&limit=10")

    @task(3)
    def list_products(self):
        self._check_page(f"/api/products/get?page={random.randint(1, 3)}&limit=10")


class CatalogWriter(HttpUser):
    """Creates a category, adds products to it, then deletes it (cascade)."""

    wait_time = between(2, 4)

    @task
    def category_lifecycle(self):
        res = self.client.post("/api/categories/create", headers=HEADERS, json={
            "name": f"Carga {random.randint(1, 10**6)}",
            "description": "Load test",
        })
        if res.status_code != 200:
            return
        category_id = res.json()["data"]["id"]

        for i in range(3):
            self.client.post("/api/products/create", headers=HEADERS, json={
                "name": f"Producto {i}",
                "price": round(random.uniform(1, 500), 2),
                "categoryId": category_id,
            })

        self.client.delete(f"/api/categories/{category_id}/delete", headers=HEADERS,
                           name="/api/categories/[id]/delete")
