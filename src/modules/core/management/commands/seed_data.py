from __future__ import annotations

import random
from datetime import date

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.addresses.models import Address
from modules.agents.models import Agent
from modules.customers.models import Customer, Gender


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        agents = self._seed_agents()
        addresses = self._seed_addresses()
        customers = self._seed_customers(agents, addresses)
        self._link_customer_login(customers[0])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"agents={len(agents)}, "
                f"addresses={len(addresses)}, "
                f"customers={len(customers)}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_agents(self) -> list[Agent]:
        self.stdout.write("Creating agents...")
        seed_agents = [
            ("Karl", "Becker", "Becker Finanz GmbH", "VM-0001"),
            ("Sabine", "Wolf", None, "VM-0002"),
            ("Jens", None, "Nordlicht Makler AG", "VM-0003"),
        ]
        agents: list[Agent] = []
        for given_name, family_name, company, reference_number in seed_agents:
            agent, _ = Agent.objects.get_or_create(
                reference_number=reference_number,
                defaults={
                    "given_name": given_name,
                    "family_name": family_name,
                    "company": company,
                },
            )
            agents.append(agent)
        return agents

    def _seed_addresses(self) -> list[Address]:
        self.stdout.write("Creating addresses...")
        seed_addresses = [
            ("Hauptstraße 1", "10115", "Berlin"),
            ("Marktplatz 7", "80331", "München"),
            ("Elbchaussee 42", "22763", "Hamburg"),
            ("Königsallee 12", "40212", "Düsseldorf"),
        ]
        addresses: list[Address] = []
        for street, postal_code, city in seed_addresses:
            address, _ = Address.objects.get_or_create(
                street=street, postal_code=postal_code, city=city
            )
            addresses.append(address)
        return addresses

    def _seed_customers(
        self, agents: list[Agent], addresses: list[Address]
    ) -> list[Customer]:
        self.stdout.write("Creating customers...")
        seed_customers = [
            ("Mustermann", "Max", date(2001, 1, 1), Gender.MALE, "max@example.com"),
            ("Schmidt", "Erika", date(1985, 6, 14), Gender.FEMALE, "erika@example.com"),
            ("Weber", "Alex", date(1992, 11, 3), Gender.OTHER, None),
            ("Fischer", "Lena", date(1978, 3, 22), None, "lena@example.com"),
            ("Meyer", "Tom", date(1969, 9, 9), Gender.MALE, "tom@example.com"),
        ]
        customers: list[Customer] = []
        for name, given_name, birth_date, gender, email in seed_customers:
            customer, created = Customer.objects.get_or_create(
                name=name,
                given_name=given_name,
                birth_date=birth_date,
                defaults={
                    "gender": gender,
                    "email": email,
                    "agent": random.choice(agents),
                },
            )
            if created:
                customer.addresses.set(random.sample(addresses, k=random.randint(0, 2)))
            customers.append(customer)
        return customers

    def _link_customer_login(self, customer: Customer) -> None:
        User = get_user_model()
        user = User.objects.get(username="user")
        if user.customer_id is None:
            user.customer = customer
            user.save(update_fields=["customer"])
