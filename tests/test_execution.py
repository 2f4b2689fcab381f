"""Tests for batch job execution."""

from app.services.execution import (
    TASK_CHUNK_TEXT,
    TASK_DATA_CLEANSING,
    JobResult,
    execute_job,
)


def _chunk_job(text: str, **setting) -> dict:
    return {"text": text, "strategy": {"setting": setting}}


def _run(task: str, inputs: list[dict], **kwargs) -> list[JobResult]:
    return [execute_job(i, task, job_input, **kwargs) for i, job_input in enumerate(inputs)]


def test_each_job_gets_its_own_result(word_factory):
    results = _run(
        TASK_CHUNK_TEXT,
        [
            _chunk_job("one two three", chunk_method="Recursive", chunk_size=50),
            _chunk_job("Hello world.", chunk_method="Token", chunk_size=5, chunk_overlap=5),
            _chunk_job("four five", chunk_method="Token", chunk_size=1, chunk_overlap=0),
        ],
        tokenizer_factory=word_factory,
    )
    assert [r.index for r in results] == [0, 1, 2]

    assert results[0].error is None
    assert results[0].output["chunk_num"] == 1
    assert results[0].output["text_chunks"][0]["text"] == "one two three"

    assert results[1].output is None
    assert results[1].error == "ChunkOverlap must be less than ChunkSize when using Token method"

    # zero overlap resolves to the default, which is not below size 1
    assert results[2].error is not None


def test_invalid_input_is_reported_per_job(word_factory):
    results = _run(
        TASK_CHUNK_TEXT,
        [{"strategy": {}}, _chunk_job("ok", chunk_method="Markdown")],
        tokenizer_factory=word_factory,
    )
    assert results[0].error.startswith("invalid input at text")
    assert results[1].error is None


def test_unexpected_error_is_reported_on_its_job(word_tokenizer):
    class FailingTokenizer:
        def count(self, text):
            if "boom" in text:
                raise RuntimeError("encoder crashed")
            return word_tokenizer.count(text)

        def token_spans(self, text):
            return word_tokenizer.token_spans(text)

    results = _run(
        TASK_CHUNK_TEXT,
        [_chunk_job("fine", chunk_method="Recursive"), _chunk_job("boom", chunk_method="Recursive")],
        tokenizer_factory=lambda setting: FailingTokenizer(),
    )
    assert results[0].error is None
    assert results[0].output["text_chunks"][0]["text"] == "fine"
    assert results[1] == JobResult(index=1, error="internal error")


def test_unknown_task_fails_every_job():
    results = _run("TASK_TRANSLATE", [{}, {}])
    assert [r.error for r in results] == ["not supported task: TASK_TRANSLATE"] * 2


def test_data_cleansing_job():
    results = _run(
        TASK_DATA_CLEANSING,
        [{"texts": ["keep me", "drop me"], "setting": {"clean_method": "Substring", "exclude_substrings": ["drop"]}}],
    )
    assert results[0].output == {"texts": ["keep me"]}
