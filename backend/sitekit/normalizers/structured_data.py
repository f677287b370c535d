def normalize_json_ld_schema(schema):
    return {
        "id": schema.id,
        "schema_type": schema.schema_type,
        "schema_data": schema.schema_data,
        "content_id": schema.content_id,
        "is_global": schema.is_global,
    }


def normalize_template(template):
    return {
        "id": template.id,
        "schema_type": template.schema_type,
        "template_json": template.template_json,
        "content_type_mapping": template.content_type_mapping,
        "auto_generate": template.auto_generate,
        "is_active": template.is_active,
    }
