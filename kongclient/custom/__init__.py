"""Custom entities in Kong: entity objects, endpoint definitions and a registry of them."""