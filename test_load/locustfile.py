from locust import HttpUser, task, between
import random

SEARCH_TERMS = ["Trailblazer", "March", "Kafka", "星", "Stellar", "Jade", "a"]

class LoadTest(HttpUser):
    wait_time = between(1, 2)

    @task(5)
    def search_translations(self):
        term = random.choice(SEARCH_TERMS)
        page = random.randint(1, 3)
        page_size = random.choice([10, 20, 50])

        self.client.get(
            f"/api/v1/translations/{term}",
            params={"page": page, "page_size": page_size},
            headers={"accept": "application/json"},
            name="/api/v1/translations/[term]",
        )

    @task(1)
    def get_languages(self):
        self.client.get(
            "/api/v1/languages",
            headers={"accept": "application/json"}
        )
