"""Customer support notifications: new questions and replies."""

import structlog

from notifier.notification.dispatch import NotificationSource
from notifier.notification.helpers import best_effort, unique_ids
from notifier.templates.payloads import NewQuestionData, QuestionReplyData

logger = structlog.get_logger(__name__)


def question_topic(question, fallback: str) -> str:
    if question.product_id and question.product_name:
        return f'product "{question.product_name}"'
    if question.order_id and question.order_number:
        return f"order #{question.order_number}"
    return fallback


class SupportNotifications:
    def __init__(self, dispatcher, resolver):
        self.dispatcher = dispatcher
        self.resolver = resolver

    def _staff_for(self, question, order=None) -> list[str]:
        """Admins, the assignee, and vendors of the product or order asked about."""
        vendor_ids = []
        if question.product_id:
            vendor_ids = self.resolver.resolve_vendors_for_product(question.product_id)
        elif order is not None:
            vendor_ids = self.resolver.resolve_vendors_for_order(order)

        return unique_ids(
            self.resolver.resolve_admins(),
            [question.assigned_to],
            vendor_ids,
        )

    @best_effort("new_question")
    async def notify_new_question(self, question, order=None):
        data = NewQuestionData(
            topic=question_topic(question, "general inquiry"),
            subject=question.subject,
            message=question.message,
        )
        return await self.dispatcher.create_notification(
            "new_question",
            data,
            NotificationSource(type="question", id=str(question.id)),
            self._staff_for(question, order),
        )

    @best_effort("question_reply")
    async def notify_question_reply(self, question, reply, order=None):
        """Notify the other side of the conversation, never the replier."""
        if reply.is_staff:
            candidates = [question.customer_id]
        else:
            candidates = self._staff_for(question, order)

        recipient_ids = unique_ids(candidates, exclude=[reply.user_id])
        if not recipient_ids:
            logger.info("No one to notify about reply", question_id=str(question.id))
            return None

        data = QuestionReplyData(
            topic=question_topic(question, "your inquiry"),
            subject=question.subject,
            reply_message=reply.message,
        )
        return await self.dispatcher.create_notification(
            "question_reply",
            data,
            NotificationSource(type="question", id=str(question.id)),
            recipient_ids,
        )
