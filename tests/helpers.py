import asyncio
from types import SimpleNamespace


def text_response(text):
    return SimpleNamespace(text=text)


def images_response(*payloads):
    return SimpleNamespace(
        generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=p)) for p in payloads]
    )


def run(coro):
    return asyncio.run(coro)
