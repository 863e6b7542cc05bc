"""
Context assembly and prompt construction.

Two templates: one grounded on retrieved articles, one that tells the
model explicitly that nothing was found so it never answers over an
empty context unknowingly.

Dependencies: langchain_core.prompts
System role: Prompt templates for the news assistant
"""

from typing import Protocol, Sequence

from langchain_core.prompts import PromptTemplate

SUPPORTED_TOPICS = "business, technology, world news, politics, and sports"

CONTEXT_SEPARATOR = "\n---\n"

CONTEXT_PROMPT = PromptTemplate.from_template(
    """You are a helpful news assistant. Based on the following news articles, answer the user's question: "{question}"

News Articles:
{context}

Please provide a comprehensive answer using only these articles. If the articles don't contain relevant information, say so explicitly and suggest what topics you can help with ({topics})."""
)

NO_CONTEXT_PROMPT = PromptTemplate.from_template(
    """You are a helpful news assistant. The user asked: "{question}"

No relevant news articles were found for this query. Let the user know you can help with questions about {topics}, but news articles need to be ingested first using the news ingestion feature."""
)


class ArticleLike(Protocol):
    title: str
    source: str
    body: str
    url: str


def format_document(document: ArticleLike) -> str:
    """Render one article as a Title / Source / Content / URL block."""
    return (
        f"Title: {document.title}\n"
        f"Source: {document.source}\n"
        f"Content: {document.body}\n"
        f"URL: {document.url}\n"
    )


def format_context(documents: Sequence[ArticleLike]) -> str:
    """
    Join rendered articles into a single context string.

    Args:
        documents: Retrieved articles

    Returns:
        str: Blocks separated by a --- line, empty string for no documents
    """
    return CONTEXT_SEPARATOR.join(format_document(doc) for doc in documents)


def build_prompt(question: str, documents: Sequence[ArticleLike]) -> str:
    """
    Build the generation prompt for a user question.

    Args:
        question: Raw user message
        documents: Retrieved articles, possibly empty

    Returns:
        str: Context-grounded prompt, or the no-context prompt when
        documents is empty
    """
    if documents:
        return CONTEXT_PROMPT.format(
            question=question,
            context=format_context(documents),
            topics=SUPPORTED_TOPICS,
        )
    return NO_CONTEXT_PROMPT.format(question=question, topics=SUPPORTED_TOPICS)
