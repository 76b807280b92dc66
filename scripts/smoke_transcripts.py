#!/usr/bin/env python3
"""
Transcript Store Smoke Script

Walks a fresh store through the seed data, grades, lookups and deletes,
printing one line per check.
Usage: python scripts/smoke_transcripts.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.core.results import StoreError
from app.services.transcript_store import TranscriptStore


def check(label: str, ok: bool) -> bool:
    print(f"    {'✅' if ok else '❌'} {label}")
    return ok


def main():
    settings = get_settings()
    store = TranscriptStore()
    results = []

    print("=" * 50)
    print("TRANSCRIPT STORE - SMOKE TEST")
    print("=" * 50)

    print("\n[1] Seeding store...")
    store.reset(settings.seed_names)
    print(f"    Seed names: {settings.seed_names}")
    results.append(check(f"{len(store)} transcripts loaded", len(store) == len(settings.seed_names)))

    print("\n[2] Adding a student...")
    ann = store.add_student("Ann")
    transcript = store.get_transcript(ann)
    results.append(check(f"Ann created with id={ann}", transcript is not None and not transcript.grades))

    print("\n[3] Recording grades...")
    results.append(check("CS101 = 95 added", store.add_grade(ann, "CS101", 95).success))
    duplicate = store.add_grade(ann, "CS101", 50)
    results.append(check("duplicate CS101 rejected", duplicate.error is StoreError.DUPLICATE_GRADE))
    results.append(check("CS101 still 95", store.get_grade(ann, "CS101").value == 95))

    print("\n[4] Looking up names...")
    ids = store.get_student_ids("Jasur")
    print(f"    Jasur -> {ids}")
    results.append(check("unknown name gives no IDs", store.get_student_ids("Nobody") == []))

    print("\n[5] Deleting...")
    results.append(check(f"student {ann} deleted", store.delete_student(ann).success))
    results.append(check("deleted student is gone", store.get_transcript(ann) is None))
    results.append(check("second delete is NOT_FOUND",
                         store.delete_student(ann).error is StoreError.NOT_FOUND))

    print("\n" + "=" * 50)
    print(f"Smoke test complete: {sum(results)}/{len(results)} checks passed")
    print("=" * 50)
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
