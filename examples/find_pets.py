"""Look up available pets on the public Swagger Petstore."""

from __future__ import annotations

import asyncio
import logging

from petstore_client import Configuration, FindPetsByStatusStatusEnum, PetApi


async def main() -> None:
    async with Configuration(base_path="https://petstore3.swagger.io/api/v3") as config:
        pet_api = PetApi(config)
        pets = await pet_api.find_pets_by_status(FindPetsByStatusStatusEnum.AVAILABLE)
        for pet in pets:
            print(pet.id, pet.name, pet.status)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
