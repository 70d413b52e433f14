"""Tests for ShortenUrlUseCase and ResolveUrlUseCase."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from shortener.application.common.errors import ErrorCategory, ErrorKind
from shortener.application.common.result import Failure, Success
from shortener.application.shortening.use_cases import ResolveUrlUseCase, ShortenUrlUseCase
from tests.fakes import (
    FailingShortUrlRepository,
    FakeMonotonic,
    FakeUnitOfWork,
    InMemoryShortUrlRepository,
    SequenceCodeGenerator,
    SlowShortUrlRepository,
)

URL = "https://example.com/very/long/path"


def make_use_case(
    repository: InMemoryShortUrlRepository | FailingShortUrlRepository,
    codes: list[str],
    max_attempts: int = 8,
    **kwargs: object,
) -> tuple[ShortenUrlUseCase, SequenceCodeGenerator, FakeUnitOfWork]:
    generator = SequenceCodeGenerator(codes)
    uow = FakeUnitOfWork()
    use_case = ShortenUrlUseCase(
        short_url_repository=repository,
        uow=uow,
        code_generator=generator,
        max_attempts=max_attempts,
        **kwargs,  # type: ignore[arg-type]
    )
    return use_case, generator, uow


class TestShorten:
    def test_valid_url_is_stored(self) -> None:
        repository = InMemoryShortUrlRepository()
        use_case, _, uow = make_use_case(repository, ["aZ3kP9q"])

        result = use_case.shorten(URL)

        assert isinstance(result, Success)
        assert result.value.code == "aZ3kP9q"
        assert result.value.url == URL
        assert result.value.id is not None
        assert result.value.is_anonymous
        assert uow.commits == 1

    def test_owner_is_recorded(self) -> None:
        repository = InMemoryShortUrlRepository()
        use_case, _, _ = make_use_case(repository, ["aZ3kP9q"])

        result = use_case.shorten(URL, owner_id="user-1")

        assert isinstance(result, Success)
        assert repository.records["aZ3kP9q"].owner_id == "user-1"

    @pytest.mark.parametrize("raw", ["not-a-url", "", "ftp://example.com"])
    def test_invalid_url_never_reaches_repository(self, raw: str) -> None:
        repository = InMemoryShortUrlRepository()
        use_case, generator, uow = make_use_case(repository, ["aZ3kP9q"])

        result = use_case.shorten(raw)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.INVALID_URL
        assert result.error.category == ErrorCategory.DOMAIN
        assert result.error.message.startswith("Invalid Url: ")
        assert repository.save_calls == []
        assert generator.calls == 0
        assert uow.commits == 0

    def test_conflict_on_every_attempt_exhausts(self) -> None:
        repository = InMemoryShortUrlRepository(taken=["taken00"])
        use_case, generator, _ = make_use_case(repository, ["taken00"], max_attempts=5)

        result = use_case.shorten(URL)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.MAX_CODE_GENERATION_ATTEMPTS
        assert result.error.category == ErrorCategory.APPLICATION
        assert len(repository.save_calls) == 5
        assert generator.calls == 5
        assert list(repository.records) == ["taken00"]

    def test_default_bound_is_eight_attempts(self) -> None:
        repository = InMemoryShortUrlRepository(taken=["taken00"])
        use_case = ShortenUrlUseCase(
            repository, FakeUnitOfWork(), SequenceCodeGenerator(["taken00"])
        )

        result = use_case.shorten(URL)

        assert isinstance(result, Failure)
        assert len(repository.save_calls) == 8

    def test_success_after_collisions(self) -> None:
        repository = InMemoryShortUrlRepository(taken=["aaaaaaa", "bbbbbbb", "ccccccc"])
        use_case, _, _ = make_use_case(repository, ["aaaaaaa", "bbbbbbb", "ccccccc", "ddddddd"])

        result = use_case.shorten(URL)

        assert isinstance(result, Success)
        assert result.value.code == "ddddddd"
        assert repository.save_calls == ["aaaaaaa", "bbbbbbb", "ccccccc", "ddddddd"]
        assert [r for r in repository.records.values() if r.url == URL] == [result.value]

    def test_non_collision_failure_returned_unchanged(self) -> None:
        repository = FailingShortUrlRepository(ErrorKind.STORAGE_FAILURE)
        use_case, _, _ = make_use_case(repository, ["aZ3kP9q"])

        result = use_case.shorten(URL)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.STORAGE_FAILURE
        assert repository.save_calls == 1

    def test_timeout_before_first_attempt(self) -> None:
        ticks = iter([0.0, 10.0])
        repository = InMemoryShortUrlRepository()
        use_case, generator, _ = make_use_case(
            repository, ["aZ3kP9q"], monotonic=lambda: next(ticks)
        )

        result = use_case.shorten(URL, timeout=5.0)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.OPERATION_TIMEOUT
        assert repository.save_calls == []
        assert generator.calls == 0

    def test_timeout_stops_retrying(self) -> None:
        ticks = iter([0.0, 1.0, 2.0, 6.0])
        repository = InMemoryShortUrlRepository(taken=["taken00"])
        use_case, _, _ = make_use_case(repository, ["taken00"], monotonic=lambda: next(ticks))

        result = use_case.shorten(URL, timeout=5.0)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.OPERATION_TIMEOUT
        assert result.error.details["attempts"] == 2
        assert len(repository.save_calls) == 2

    def test_invalid_max_attempts(self) -> None:
        with pytest.raises(ValueError):
            ShortenUrlUseCase(
                InMemoryShortUrlRepository(),
                FakeUnitOfWork(),
                SequenceCodeGenerator(["x"]),
                max_attempts=0,
            )

    def test_concurrent_shortens_drawing_the_same_code(self) -> None:
        repository = InMemoryShortUrlRepository()
        first, _, _ = make_use_case(repository, ["samecod", "othera1"])
        second, _, _ = make_use_case(repository, ["samecod", "otherb2"])

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [
                pool.submit(first.shorten, "https://one.example"),
                pool.submit(second.shorten, "https://two.example"),
            ]
            results = [future.result() for future in futures]

        assert all(isinstance(r, Success) for r in results)
        codes = {r.unwrap().code for r in results}
        assert len(codes) == 2
        assert "samecod" in codes
        assert repository.save_calls.count("samecod") == 2


class TestResolve:
    def test_resolves_stored_url(self) -> None:
        repository = InMemoryShortUrlRepository()
        shorten, _, _ = make_use_case(repository, ["aZ3kP9q"])
        shorten.shorten(URL)

        result = ResolveUrlUseCase(repository).resolve("aZ3kP9q")

        assert isinstance(result, Success)
        assert result.value.url == URL

    def test_unknown_code_is_not_found(self) -> None:
        result = ResolveUrlUseCase(InMemoryShortUrlRepository()).resolve("missing")

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.RESOURCE_NOT_FOUND

    def test_empty_code_skips_lookup(self) -> None:
        repository = InMemoryShortUrlRepository()
        result = ResolveUrlUseCase(repository).resolve("")

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.RESOURCE_NOT_FOUND
        assert repository.find_calls == []

    def test_storage_failure_passes_through(self) -> None:
        result = ResolveUrlUseCase(FailingShortUrlRepository()).resolve("aZ3kP9q")

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.STORAGE_FAILURE

    def test_timeout_is_passed_to_the_store(self) -> None:
        repository = InMemoryShortUrlRepository(taken=["aZ3kP9q"])

        result = ResolveUrlUseCase(repository).resolve("aZ3kP9q", timeout=2.0)

        assert isinstance(result, Success)
        assert repository.find_timeouts == [2.0]

    def test_slow_lookup_times_out(self) -> None:
        clock = FakeMonotonic()
        repository = SlowShortUrlRepository(clock, delay=3.0, taken=["aZ3kP9q"])
        use_case = ResolveUrlUseCase(repository, monotonic=clock)

        result = use_case.resolve("aZ3kP9q", timeout=2.0)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.OPERATION_TIMEOUT
        assert result.error.category == ErrorCategory.APPLICATION
        assert result.error.details["code"] == "aZ3kP9q"

    def test_lookup_within_timeout_succeeds(self) -> None:
        clock = FakeMonotonic()
        repository = SlowShortUrlRepository(clock, delay=0.5, taken=["aZ3kP9q"])
        use_case = ResolveUrlUseCase(repository, monotonic=clock)

        result = use_case.resolve("aZ3kP9q", timeout=2.0)

        assert isinstance(result, Success)
        assert result.value.url == "https://taken.example"

    def test_no_timeout_waits_for_the_store(self) -> None:
        clock = FakeMonotonic()
        repository = SlowShortUrlRepository(clock, delay=60.0, taken=["aZ3kP9q"])

        result = ResolveUrlUseCase(repository, monotonic=clock).resolve("aZ3kP9q")

        assert isinstance(result, Success)

    def test_spent_timeout_skips_lookup(self) -> None:
        repository = InMemoryShortUrlRepository(taken=["aZ3kP9q"])

        result = ResolveUrlUseCase(repository).resolve("aZ3kP9q", timeout=0)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.OPERATION_TIMEOUT
        assert repository.find_calls == []

    def test_store_timeout_passes_through(self) -> None:
        repository = FailingShortUrlRepository(ErrorKind.OPERATION_TIMEOUT)

        result = ResolveUrlUseCase(repository).resolve("aZ3kP9q", timeout=2.0)

        assert isinstance(result, Failure)
        assert result.error.kind == ErrorKind.OPERATION_TIMEOUT
        assert result.error.category == ErrorCategory.INFRASTRUCTURE
