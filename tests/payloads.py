"""Canned provider response bodies."""


def gemini_text(*texts, finish_reason="STOP"):
    return {
        "candidates": [{
            "content": {"role": "model", "parts": [{"text": t} for t in texts]},
            "finishReason": finish_reason,
        }]
    }


def gemini_truncated():
    return {"candidates": [{"content": {"role": "model", "parts": []}, "finishReason": "MAX_TOKENS"}]}


def gemini_blocked(reason="SAFETY"):
    return {"promptFeedback": {"blockReason": reason}}


def openai_text(text):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}
