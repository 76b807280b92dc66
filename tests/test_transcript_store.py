"""
Unit tests for the in-memory transcript store
"""
import threading

from app.core.results import StoreError, StoreResult
from app.models.transcript import CourseGrade, Transcript


class TestReset:
    """Seeding and resetting the store"""

    def test_reset_assigns_ids_in_order(self, store):
        store.reset(["Sardor", "Jasur", "Jasur", "Nigora"])
        transcripts = store.list_all()

        assert [t.student.student_id for t in transcripts] == [1, 2, 3, 4]
        assert [t.student.student_name for t in transcripts] == ["Sardor", "Jasur", "Jasur", "Nigora"]
        assert all(t.grades == [] for t in transcripts)

    def test_reset_discards_previous_state(self, seeded_store):
        seeded_store.add_grade(1, "Math", 80)
        seeded_store.add_student("Extra")

        seeded_store.reset(["Ann", "Bob"])
        transcripts = seeded_store.list_all()

        assert len(transcripts) == 2
        assert [t.student.student_name for t in transcripts] == ["Ann", "Bob"]
        assert seeded_store.get_transcript(1).grades == []
        assert seeded_store.get_transcript(3) is None

    def test_reset_restarts_id_counter(self, seeded_store):
        seeded_store.add_student("Fifth")
        seeded_store.reset([])

        assert seeded_store.list_all() == []
        assert seeded_store.add_student("First again") == 1


class TestStudents:
    """Adding, finding and deleting students"""

    def test_add_student_returns_increasing_ids(self, store):
        ids = [store.add_student(name) for name in ["A", "B", "C", "D"]]
        assert ids == [1, 2, 3, 4]

    def test_add_student_creates_empty_transcript(self, store):
        student_id = store.add_student("Ann")
        transcript = store.get_transcript(student_id)

        assert transcript.student.student_id == student_id
        assert transcript.student.student_name == "Ann"
        assert transcript.grades == []

    def test_add_student_accepts_empty_name(self, store):
        student_id = store.add_student("")
        assert store.get_transcript(student_id).student.student_name == ""

    def test_get_transcript_missing_returns_none(self, seeded_store):
        assert seeded_store.get_transcript(999) is None
        assert seeded_store.get_transcript(0) is None

    def test_get_student_ids_matches_exact_name(self, seeded_store):
        assert sorted(seeded_store.get_student_ids("Jasur")) == [2, 3]
        assert seeded_store.get_student_ids("Sardor") == [1]

    def test_get_student_ids_is_case_sensitive(self, seeded_store):
        assert seeded_store.get_student_ids("jasur") == []

    def test_get_student_ids_no_match(self, seeded_store):
        assert seeded_store.get_student_ids("Nobody") == []

    def test_delete_student(self, seeded_store):
        result = seeded_store.delete_student(2)

        assert result.success
        assert seeded_store.get_transcript(2) is None
        assert seeded_store.get_student_ids("Jasur") == [3]

    def test_delete_missing_student(self, seeded_store):
        result = seeded_store.delete_student(999)

        assert not result.success
        assert result.error is StoreError.NOT_FOUND
        assert "999" in result.detail
        assert len(seeded_store) == 4

    def test_deleted_id_is_never_reused(self, seeded_store):
        seeded_store.delete_student(4)
        new_ids = [seeded_store.add_student("New") for _ in range(3)]

        assert 4 not in new_ids
        assert new_ids == [5, 6, 7]
        assert seeded_store.get_transcript(4) is None

    def test_delete_twice_fails_second_time(self, seeded_store):
        assert seeded_store.delete_student(1).success
        assert seeded_store.delete_student(1).error is StoreError.NOT_FOUND


class TestGrades:
    """Adding and looking up grades"""

    def test_add_then_get_grade(self, seeded_store):
        assert seeded_store.add_grade(1, "CS101", 95).success

        result = seeded_store.get_grade(1, "CS101")
        assert result.success
        assert result.value == 95

    def test_grades_keep_insertion_order(self, seeded_store):
        seeded_store.add_grade(1, "Math", 90)
        seeded_store.add_grade(1, "Art", 70.5)
        seeded_store.add_grade(1, "Bio", 88)

        grades = seeded_store.get_transcript(1).grades
        assert [(g.course, g.grade) for g in grades] == [("Math", 90), ("Art", 70.5), ("Bio", 88)]

    def test_duplicate_grade_rejected_and_original_kept(self, seeded_store):
        assert seeded_store.add_grade(1, "Math", 90).success

        result = seeded_store.add_grade(1, "Math", 90)
        assert not result.success
        assert result.error is StoreError.DUPLICATE_GRADE

        other = seeded_store.add_grade(1, "Math", 10)
        assert other.error is StoreError.DUPLICATE_GRADE

        assert seeded_store.get_grade(1, "Math").value == 90
        assert len(seeded_store.get_transcript(1).grades) == 1

    def test_course_match_is_case_sensitive(self, seeded_store):
        assert seeded_store.add_grade(1, "math", 60).success
        assert seeded_store.add_grade(1, "Math", 70).success
        assert seeded_store.get_grade(1, "MATH").error is StoreError.GRADE_NOT_FOUND

    def test_same_course_for_different_students(self, seeded_store):
        assert seeded_store.add_grade(2, "Math", 60).success
        assert seeded_store.add_grade(3, "Math", 75).success
        assert seeded_store.get_grade(2, "Math").value == 60
        assert seeded_store.get_grade(3, "Math").value == 75

    def test_zero_and_out_of_range_grades_are_valid(self, seeded_store):
        assert seeded_store.add_grade(1, "Zero", 0).success
        assert seeded_store.add_grade(1, "Negative", -5).success
        assert seeded_store.add_grade(1, "Bonus", 120).success
        assert seeded_store.get_grade(1, "Zero").value == 0

    def test_add_grade_unknown_student(self, seeded_store):
        result = seeded_store.add_grade(999, "CS101", 95)

        assert result.error is StoreError.NOT_FOUND
        assert seeded_store.get_transcript(999) is None

    def test_get_grade_missing_course(self, seeded_store):
        seeded_store.add_grade(1, "CS101", 95)
        result = seeded_store.get_grade(1, "CS999")

        assert not result.success
        assert result.error is StoreError.GRADE_NOT_FOUND
        assert result.value is None

    def test_get_grade_unknown_student(self, seeded_store):
        result = seeded_store.get_grade(999, "CS101")
        assert result.error is StoreError.NOT_FOUND

    def test_deleted_student_grades_are_gone(self, seeded_store):
        seeded_store.add_grade(1, "CS101", 95)
        seeded_store.delete_student(1)

        assert seeded_store.get_grade(1, "CS101").error is StoreError.NOT_FOUND
        assert seeded_store.add_grade(1, "CS101", 95).error is StoreError.NOT_FOUND


class TestIsolation:
    """Returned records do not alias store state"""

    def test_mutating_returned_transcript_does_not_change_store(self, seeded_store):
        seeded_store.add_grade(1, "Math", 90)

        copy = seeded_store.get_transcript(1)
        copy.grades.clear()

        assert len(seeded_store.get_transcript(1).grades) == 1

    def test_list_all_returns_copies(self, seeded_store):
        for transcript in seeded_store.list_all():
            transcript.grades.append(CourseGrade(course="Injected", grade=1))

        assert all(t.grades == [] for t in seeded_store.list_all())

    def test_list_all_returns_transcripts(self, seeded_store):
        assert all(isinstance(t, Transcript) for t in seeded_store.list_all())


class TestConcurrency:
    """Store-wide lock keeps operations atomic across threads"""

    def test_concurrent_add_student_ids_are_unique(self, store):
        ids = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(50):
                student_id = store.add_student("Worker")
                with ids_lock:
                    ids.append(student_id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ids) == 400
        assert sorted(ids) == list(range(1, 401))

    def test_concurrent_duplicate_grades_only_one_wins(self, seeded_store):
        results = []
        results_lock = threading.Lock()

        def worker(grade):
            result = seeded_store.add_grade(1, "Math", grade)
            with results_lock:
                results.append(result)

        threads = [threading.Thread(target=worker, args=(g,)) for g in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sum(r.success for r in results) == 1
        assert len(seeded_store.get_transcript(1).grades) == 1


class TestStoreResult:
    """StoreResult success/failure helpers"""

    def test_succeed(self):
        result = StoreResult.succeed(42)
        assert result.success
        assert result.value == 42
        assert result.error is None

    def test_fail(self):
        result = StoreResult.fail(StoreError.GRADE_NOT_FOUND, "No grade found for course X")
        assert not result.success
        assert result.value is None
        assert result.error is StoreError.GRADE_NOT_FOUND
        assert "GRADE_NOT_FOUND" in repr(result)
