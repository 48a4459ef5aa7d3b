# -*- coding: utf-8 -*-
from google.protobuf.json_format import Parse
from google.protobuf.text_format import MessageToString


def message_to_str(message) -> str:
    return MessageToString(message, as_one_line=True, force_colon=True)


def message_to_pydantic(message, pydantic_model):
    """Convert protobuf message to pydantic model"""
    return pydantic_model.model_validate(message, from_attributes=True)


def pydantic_to_message(schema, message_cls):
    """Convert pydantic model to protobuf message"""
    return Parse(schema.model_dump_json(), message_cls(), ignore_unknown_fields=True)
