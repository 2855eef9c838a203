from locust import HttpUser, task, between
import random

MENU_TEXTS = [
    "唐揚げ定食をください",
    "炙りサーモンの寿司",
    "大トロと刺身の盛り合わせ",
    "海老の天ぷら",
    "ラーメン大盛り",
    "豆腐とゴマのサラダ",
]


class LoadTest(HttpUser):
    wait_time = between(1, 2)

    @task(5)
    def translate(self):
        self.client.post(
            "/api/v1/translation/translate",
            json={"text": random.choice(MENU_TEXTS), "targetLang": random.choice(["en", "zh"])},
            headers={"accept": "application/json"}
        )

    @task(1)
    def find_terms(self):
        self.client.post(
            "/api/v1/dictionary/terms",
            json={"text": random.choice(MENU_TEXTS)},
            headers={"accept": "application/json"}
        )
