"""Factory classes for test data generation."""

import uuid
from datetime import timedelta

from django.utils import timezone

import factory
from factory.django import DjangoModelFactory
from faker import Faker

from core.constants.task import TTL_AFTER_EXPIRY
from core.enums import NotificationStatusEnum, NotificationType, TaskStatus
from core.models import Notification, Task, User

fake = Faker()


class UserFactory(DjangoModelFactory):
    """Factory for User rows."""

    class Meta:
        model = User

    user_id = factory.LazyFunction(lambda: fake.uuid4())
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    name = factory.LazyAttribute(lambda _: fake.name())
    push_token = None


class TaskFactory(DjangoModelFactory):
    """Factory for pending tasks between two new users."""

    class Meta:
        model = Task

    class Params:
        creator = factory.SubFactory(UserFactory)
        assignee = factory.SubFactory(UserFactory)

    title = factory.LazyAttribute(lambda _: fake.sentence(nb_words=4))
    note = None
    creator_id = factory.SelfAttribute("creator.user_id")
    creator_email = factory.SelfAttribute("creator.email")
    creator_name = factory.SelfAttribute("creator.name")
    assignee_id = factory.SelfAttribute("assignee.user_id")
    assignee_email = factory.SelfAttribute("assignee.email")
    assignee_name = factory.SelfAttribute("assignee.name")
    status = TaskStatus.PENDING.value
    assignee_reaction = None
    duration_minutes = 30
    expires_at = factory.LazyFunction(lambda: timezone.now() + timedelta(minutes=30))
    ttl = factory.LazyAttribute(lambda o: o.expires_at + TTL_AFTER_EXPIRY)
    extension_count = 0
    notification_sent = False
    created_at = factory.LazyFunction(timezone.now)
    updated_at = factory.SelfAttribute("created_at")


class NotificationFactory(DjangoModelFactory):
    """Factory for task notification rows."""

    class Meta:
        model = Notification

    notification_type = NotificationType.TASK_ASSIGNED.value
    recipient_id = factory.LazyFunction(lambda: fake.uuid4())
    sender_id = factory.LazyFunction(lambda: fake.uuid4())
    task_id = factory.LazyFunction(uuid.uuid4)
    title = factory.LazyAttribute(lambda _: f"New task from {fake.first_name()}")
    body = factory.LazyAttribute(lambda _: fake.sentence(nb_words=5))
    data = factory.LazyAttribute(
        lambda o: {"taskId": str(o.task_id), "type": o.notification_type}
    )
    status = NotificationStatusEnum.PENDING.value
    is_read = False
    created_at = factory.LazyFunction(timezone.now)
