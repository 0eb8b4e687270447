from upload_validator.core.file_validation import validate
from upload_validator.schemas.validation import ValidationOptions

# A PDF whose catalog references XMP metadata and a JavaScript open action.
SAMPLE_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Type /Catalog /Metadata 2 0 R /OpenAction 3 0 R >> endobj\n"
    b"3 0 obj << /S /JavaScript >> endobj\n"
    b"trailer << /Root 1 0 R >>\n"
    b"%%EOF\n"
)

# A clean PDF with nothing but XMP metadata.
METADATA_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Type /Catalog /Metadata 2 0 R >> endobj\n"
    b"trailer << /Root 1 0 R >>\n"
    b"%%EOF\n"
)


def run_scenario(title: str, contents: bytes, whitelist: list[str]) -> None:
    print(f"\n{title}")
    print("-"*50)
    print(f"Whitelist: {whitelist or 'none'}")
    verdict = validate(contents, "pdf", ValidationOptions(whitelist=whitelist))
    print(f"Status:    {'✅ PASS' if verdict.passed else '❌ FAIL'}")
    print(f"Message:   {verdict.message}")


def whitelist_demo() -> None:
    print("\n" + "="*50)
    print("PDF Whitelist Demo")
    print("="*50)

    # ── Scripted PDF ──────────────────────────────────
    run_scenario("Scenario 1: default (strict)", SAMPLE_PDF, [])
    run_scenario("Scenario 2: OpenAction whitelisted", SAMPLE_PDF, ["OpenAction"])
    run_scenario(
        "Scenario 3: every flagged name whitelisted",
        SAMPLE_PDF,
        ["OpenAction", "JavaScript", "JS", "Metadata"],
    )

    # ── Metadata-only PDF ─────────────────────────────
    run_scenario("Scenario 4: metadata PDF, strict", METADATA_PDF, [])
    run_scenario("Scenario 5: metadata PDF, Metadata whitelisted", METADATA_PDF, ["Metadata"])

    print("\n" + "="*50 + "\n")


if __name__ == "__main__":
    whitelist_demo()
