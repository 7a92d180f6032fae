"""LLM access for the AI-assisted interpretation producer."""

from vagueparse.llm._llm_call import LLMCallResult, guarded_llm_call

__all__ = ["LLMCallResult", "guarded_llm_call"]
