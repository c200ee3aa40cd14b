import asyncio
import logging

from fastapi import HTTPException

from sec_upload.core.config import settings
from sec_upload.repositories.upload_repository import InMemoryUploadRepository
from sec_upload.services.upload_service import UploadService

MENU = """What do you want to do ?
  1 - Upload a file
  2 - Verify a file
  3 - Get the URL of a file
  0 - Exit"""


def _prompt(message: str) -> str:
    while True:
        value = input(message).strip()
        if value:
            return value


async def upload_handler(service: UploadService) -> None:
    while True:
        path = _prompt("Please enter the path to an image or video file : ")
        try:
            upload = await service.upload_file(path)
        except HTTPException as e:
            print(e.detail)
            # A duplicate is an answer, not a reason to ask again
            if e.status_code == 409:
                print()
                return
            continue
        print(f"File uploaded successfully, UUID : {upload.id}\n")
        return


async def verify_handler(service: UploadService) -> None:
    while True:
        upload_id = _prompt("Please enter the UUID to check : ")
        try:
            upload = await service.verify_file(upload_id)
        except HTTPException as e:
            if e.status_code == 400:
                print(e.detail)
                continue
            print(f"{e.detail}\n")
            return
        print(f"File {upload_id} exists, it is a {upload.kind} file.\n")
        return


async def get_url_handler(service: UploadService) -> None:
    while True:
        upload_id = _prompt("Please enter the UUID to get : ")
        try:
            result = await service.get_file_url(upload_id)
        except HTTPException as e:
            if e.status_code == 400:
                print(e.detail)
                continue
            print(f"{e.detail}\n")
            return
        print(f"{result.url}\n")
        return


async def run_demo(service: UploadService) -> None:
    handlers = {
        "1": upload_handler,
        "2": verify_handler,
        "3": get_url_handler,
    }
    print("Welcome to the super secure file upload tool !")
    while True:
        print(MENU)
        choice = _prompt("Your choice (0-3) : ")
        if choice == "0":
            print("Goodbye!")
            return
        handler = handlers.get(choice)
        if handler is None:
            print("Invalid choice !\n")
            continue
        await handler(service)


def demo():
    """Interactive upload/verify/get-URL menu - usage: sec-upload-demo."""
    # The menu prints every rejection itself
    logging.basicConfig(level=logging.ERROR)
    logging.getLogger("sec_upload").setLevel(logging.ERROR)
    service = UploadService(
        InMemoryUploadRepository(),
        namespace=settings.UPLOAD_NAMESPACE,
        url_prefix=settings.URL_PREFIX,
        check_extension=settings.CHECK_EXTENSION,
        max_file_size_mb=settings.MAX_FILE_SIZE_MB,
    )
    try:
        asyncio.run(run_demo(service))
    except (EOFError, KeyboardInterrupt):
        print()
