"""
Upload an image and wait for its analysis.

Usage: python -m showcase.client <image_path>
"""

import asyncio
import sys
from pathlib import Path

from showcase.client.api_client import ShowcaseAPIClient
from showcase.client.gallery import ImageGallery
from showcase.client.orchestrator import (
    PollingPolicy,
    SelectedFile,
    UploadOrchestrator,
    UploadState,
)
from showcase.configs import get_settings
from showcase.observability.logger import configure_logging


def print_state(state: UploadState, message: str) -> None:
    if message:
        print(f"[{state.value}] {message}")


async def upload_and_wait(path: Path) -> int:
    settings = get_settings()
    polling = settings.polling

    async with ShowcaseAPIClient(polling.base_url, timeout=polling.request_timeout) as api:
        gallery = ImageGallery(api)
        orchestrator = UploadOrchestrator(
            api,
            policy=PollingPolicy.from_settings(polling),
            on_upload_success=gallery.refresh,
            on_state_change=print_state,
        )
        orchestrator.select_file(SelectedFile.from_path(path))
        await orchestrator.analyze()
        state = await orchestrator.wait_until_settled()

        if state is UploadState.ERROR:
            return 1

        for image in gallery.images:
            if image.file_name == path.name:
                print(f"Labels: {', '.join(image.detected_labels)}")
                colors = ", ".join(
                    f"rgb({c.red}, {c.green}, {c.blue})" for c in image.dominant_colors
                )
                print(f"Colors: {colors}")
        await orchestrator.close()
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m showcase.client <image_path>")
        sys.exit(1)

    image_path = Path(sys.argv[1])
    if not image_path.exists():
        print(f"File not found: {image_path}")
        sys.exit(1)

    configure_logging(get_settings().log_level)
    sys.exit(asyncio.run(upload_and_wait(image_path)))
