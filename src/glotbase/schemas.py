"""
marshmallow schemas for the camelCase JSON shape used in storage and in
exported files.  Loading returns plain dicts keyed by the dataclass field
names, ready for ``WordEntry(**data)`` / ``AffixRule(**data)``.
"""

from __future__ import annotations

from datetime import datetime

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validate

from glotbase.models import AffixType, PartOfSpeech, ROOT_PLACEHOLDER


class Timestamp(fields.DateTime):
    """ISO-8601 datetime that also accepts already revived datetimes."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, datetime):
            return value
        return super()._deserialize(value, attr, data, **kwargs)


class LenientTimestamp(Timestamp):
    """Timestamp that loads as None when it cannot be parsed."""

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return super()._deserialize(value, attr, data, **kwargs)
        except ValidationError:
            return None


class WordEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True)
    native_script = fields.Str(data_key="nativeScript", load_default="")
    romanization = fields.Str(required=True)
    ipa = fields.Str(load_default="")
    part_of_speech = fields.Enum(PartOfSpeech, by_value=True, data_key="partOfSpeech", required=True)
    etymology = fields.Str(load_default="")
    gender = fields.Str(load_default="neutral", validate=validate.Length(min=1))
    definition = fields.Str(load_default="")
    tags = fields.List(fields.Str(), load_default=list)
    is_root = fields.Bool(data_key="isRoot", load_default=True)
    root_word_id = fields.Str(data_key="rootWordId", allow_none=True, load_default=None)
    notes = fields.Str(allow_none=True, load_default=None)
    created_at = Timestamp(data_key="createdAt", required=True)
    updated_at = Timestamp(data_key="updatedAt", required=True)


class ImportedWordSchema(WordEntrySchema):
    """Exported records as read back; the dates are regenerated on import."""

    created_at = LenientTimestamp(data_key="createdAt", allow_none=True)
    updated_at = LenientTimestamp(data_key="updatedAt", allow_none=True)


class AffixRuleSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True)
    name = fields.Str(required=True, validate=validate.Length(min=1))
    type = fields.Enum(AffixType, by_value=True, required=True)
    pattern = fields.Str(load_default=ROOT_PLACEHOLDER)
    replacement = fields.Str(required=True)
    resulting_pos = fields.Enum(
        PartOfSpeech, by_value=True, data_key="resultingPOS",
        allow_none=True, load_default=None,
    )
    description = fields.Str(load_default="")
    example = fields.Str(load_default="")

    @pre_load
    def _blank_pos_is_none(self, data, **kwargs):
        if isinstance(data, dict) and data.get("resultingPOS") == "":
            data = {**data, "resultingPOS": None}
        return data


# Fields that an import regenerates instead of trusting
IMPORT_REGENERATED = ("id", "created_at", "updated_at")
