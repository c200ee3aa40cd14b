"""Run the file and UUID validators over a directory and print what they decide."""
import sys
from pathlib import Path

from sec_upload.core.config import settings
from sec_upload.core.file_validation import extension_matches, sniff_file, validate_file
from sec_upload.core.uuid_validation import derive_uuid, validate_uuid


def check_files(directory: str) -> None:
    print("\n" + "="*50)
    print(f"🔍 Checking files in {directory}")
    print("="*50)

    for path in sorted(Path(directory).iterdir()):
        if not path.is_file():
            continue
        print(f"\n📄 {path.name}")
        try:
            kind = sniff_file(path)
        except OSError as e:
            print(f"   ❌ {e.strerror or e}")
            continue
        if kind is None:
            print("   ❌ File type is unknown.")
            continue

        classification = validate_file(path, check_extension=True)
        content_uuid = derive_uuid(settings.UPLOAD_NAMESPACE, path.read_bytes())
        print(f"   Detected:  {kind.mime} (.{kind.extension})")
        print(f"   Extension: {'✅ matches' if extension_matches(path, kind.extension) else '❌ mismatch'}")
        print(f"   Result:    {classification.name}")
        print(f"   UUID:      {content_uuid} ({'ok' if validate_uuid(str(content_uuid)) else 'bad'})")


if __name__ == "__main__":
    check_files(sys.argv[1] if len(sys.argv) > 1 else ".")
