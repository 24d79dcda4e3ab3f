from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Literal


class ChainEntryReport(BaseModel):
    """
    Represents one entry of an ancestor chain.
    """
    index: int
    label: str  # e.g. "[C] Base" or "S[M] Extension"
    name: str
    kind: Literal["class", "module"]
    singleton_origin: bool = False
    instance_methods: Dict[str, List[str]] = Field(default_factory=dict)  # visibility -> names
    class_methods: Dict[str, List[str]] = Field(default_factory=dict)


class ChainReport(BaseModel):
    """
    Annotated ancestor chain of a root type.
    """
    root: str
    exclude_trivial: bool = True
    entries: List[ChainEntryReport] = Field(default_factory=list)


class SuperStepReport(BaseModel):
    """
    One resolved method in a super walk.
    """
    step: int  # 0 = current owner, 1 = first super, ...
    owner: str
    label: str
    level: Literal["instance", "class"]
    name: str
    visibility: Literal["public", "protected", "private"]
    remaining: int  # Chain entries left to search after this step


class NoOverrideReport(BaseModel):
    """
    Why a super walk stopped.
    """
    root: str
    level: Literal["instance", "class"]
    name: str
    message: str


class SuperChainReport(BaseModel):
    """
    Owner of a method followed by every successive override.
    """
    root: str
    level: Literal["instance", "class"]
    name: str
    steps: List[SuperStepReport] = Field(default_factory=list)
    stopped: Optional[NoOverrideReport] = None
