from pydantic import BaseModel, ConfigDict, Field, field_serializer


class PatchRecord(BaseModel):
    """
    One byte-level edit: the bytes expected at `target_address` and the
    bytes that replace them. `old` and `new` may differ in length.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    target_address: int = Field(ge=0)
    old: bytes = Field(min_length=1)
    new: bytes = Field(min_length=1)

    @field_serializer("old", "new", when_used="json")
    def serialize_bytes(self, v: bytes) -> str:
        return v.hex().upper()

    def __str__(self) -> str:
        return f"{self.target_address:016X}:{self.old.hex().upper()}->{self.new.hex().upper()}"


class PatchFile(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    target_filename: str = Field(min_length=1)
    # source order; later records may rely on earlier ones being applied
    patches: tuple[PatchRecord, ...] = ()

    def addresses(self) -> list[int]:
        return [patch.target_address for patch in self.patches]
