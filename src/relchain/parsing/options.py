"""
Configuration for the transitive relation parser.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParserOptions(BaseModel):
    """Tunable strictness for relation parsing.

    Defaults accept every expression the DSL grammar describes, including
    whitespace around the whole expression.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_outer_whitespace: bool = Field(
        default=True,
        description="Tolerate whitespace before '[' and after the close field",
    )
    max_chain_length: int | None = Field(
        default=None,
        gt=0,
        description="Upper bound on the number of chain links, unbounded when None",
    )


DEFAULT_OPTIONS = ParserOptions()
