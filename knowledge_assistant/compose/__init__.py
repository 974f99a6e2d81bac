"""Answer composition: grounded, templated responses with citations."""

from knowledge_assistant.compose.composer import ANSWER_HEADER, citation, compose

__all__ = ["ANSWER_HEADER", "citation", "compose"]
