# Backend MCP Bridge - PocketBase field schema reference

COMMON_FIELD_OPTIONS = {
    "name": "Unique field name within the collection (required)",
    "type": "Field type, one of the keys of field_types (required)",
    "required": "Reject empty values (bool, default false)",
    "hidden": "Hide the field from API responses (bool)",
    "presentable": "Show the field value in relation previews in the dashboard (bool)",
    "system": "Mark as a system field that cannot be renamed or deleted (bool)",
    "id": "Existing field id, only needed when updating a field in update_collection"
}

FIELD_TYPES = {
    "text": {
        "description": "Plain text value",
        "options": {
            "min": "Minimum length (int)",
            "max": "Maximum length (int, 0 = default 5000)",
            "pattern": "Regex the value must match",
            "autogeneratePattern": "Regex used to autogenerate a value when empty",
            "primaryKey": "Use as the record id field (bool)"
        },
        "example": {"name": "title", "type": "text", "required": True, "max": 200}
    },
    "editor": {
        "description": "Rich text (HTML) value",
        "options": {
            "maxSize": "Maximum size in bytes (int)",
            "convertURLs": "Convert relative URLs to absolute (bool)"
        },
        "example": {"name": "content", "type": "editor"}
    },
    "number": {
        "description": "Numeric value (float64)",
        "options": {
            "min": "Minimum value",
            "max": "Maximum value",
            "onlyInt": "Allow only integers (bool)"
        },
        "example": {"name": "rating", "type": "number", "min": 0, "max": 5}
    },
    "bool": {
        "description": "true/false value",
        "options": {},
        "example": {"name": "published", "type": "bool"}
    },
    "email": {
        "description": "Email address",
        "options": {
            "exceptDomains": "Disallowed domains (array of strings)",
            "onlyDomains": "Allowed domains (array of strings)"
        },
        "example": {"name": "contact", "type": "email"}
    },
    "url": {
        "description": "URL value",
        "options": {
            "exceptDomains": "Disallowed domains (array of strings)",
            "onlyDomains": "Allowed domains (array of strings)"
        },
        "example": {"name": "website", "type": "url"}
    },
    "date": {
        "description": "Datetime string in 'Y-m-d H:i:s.uZ' format",
        "options": {
            "min": "Earliest allowed datetime",
            "max": "Latest allowed datetime"
        },
        "example": {"name": "due", "type": "date"}
    },
    "autodate": {
        "description": "Datetime set automatically on create and/or update",
        "options": {
            "onCreate": "Set the value when the record is created (bool)",
            "onUpdate": "Set the value when the record is updated (bool)"
        },
        "example": {"name": "updated", "type": "autodate", "onCreate": True, "onUpdate": True}
    },
    "select": {
        "description": "One or more values from a fixed list",
        "options": {
            "values": "Allowed values (array of strings, required)",
            "maxSelect": "Maximum number of selected values (1 = single select)"
        },
        "example": {"name": "status", "type": "select", "values": ["draft", "published"], "maxSelect": 1}
    },
    "file": {
        "description": "One or more uploaded files",
        "options": {
            "maxSelect": "Maximum number of files",
            "maxSize": "Maximum size per file in bytes",
            "mimeTypes": "Allowed MIME types (array of strings)",
            "thumbs": "Thumbnail sizes, e.g. ['100x100'] (array of strings)",
            "protected": "Require a file token to download (bool)"
        },
        "example": {"name": "cover", "type": "file", "maxSelect": 1, "mimeTypes": ["image/png", "image/jpeg"]}
    },
    "relation": {
        "description": "Reference to one or more records of another collection",
        "options": {
            "collectionId": "Id of the related collection (required)",
            "cascadeDelete": "Delete this record when the related one is deleted (bool)",
            "minSelect": "Minimum number of related records",
            "maxSelect": "Maximum number of related records (1 = single relation)"
        },
        "example": {"name": "author", "type": "relation", "collectionId": "_pb_users_auth_", "maxSelect": 1}
    },
    "json": {
        "description": "Any serialized JSON value",
        "options": {
            "maxSize": "Maximum size in bytes"
        },
        "example": {"name": "metadata", "type": "json"}
    },
    "geoPoint": {
        "description": "Geographic coordinate stored as {lon, lat}",
        "options": {},
        "example": {"name": "location", "type": "geoPoint"}
    },
    "password": {
        "description": "Bcrypt-hashed password value (auth collections)",
        "options": {
            "min": "Minimum length",
            "max": "Maximum length",
            "pattern": "Regex the value must match",
            "cost": "Bcrypt cost"
        },
        "example": {"name": "password", "type": "password", "min": 8}
    }
}

COLLECTION_EXAMPLE = {
    "name": "tasks",
    "type": "base",
    "fields": [
        FIELD_TYPES["text"]["example"],
        FIELD_TYPES["select"]["example"],
        FIELD_TYPES["relation"]["example"],
        FIELD_TYPES["autodate"]["example"]
    ],
    "listRule": "",
    "viewRule": ""
}
