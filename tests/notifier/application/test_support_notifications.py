import pytest
from shared.contracts.ordering import Order, OrderItem
from shared.contracts.support import Question, Reply

CUSTOMER_ID = "cust-001"
ADMIN_ID = "admin-001"
VENDOR_ID = "vendor-001"
SECOND_VENDOR_ID = "vendor-002"
PRODUCT_ID = "prod-roller-shade"


def make_question(**overrides):
    values = {
        "id": "q-1",
        "customer_id": CUSTOMER_ID,
        "subject": "Sizing",
        "message": "Will a 36 inch shade fit my window?",
    }
    values.update(overrides)
    return Question(**values)


def recipient_ids(notification):
    return [str(r.user_id) for r in notification.recipients]


@pytest.fixture
def support(service):
    return service.support


class TestNewQuestion:
    @pytest.mark.asyncio
    async def test_product_question_reaches_admins_and_vendors(self, service, support, users):
        question = make_question(product_id=PRODUCT_ID, product_name="Roller Shade")

        notification = await support.notify_new_question(question)
        await service.drain()

        assert recipient_ids(notification) == [ADMIN_ID, VENDOR_ID]
        assert notification.content == 'New question about product "Roller Shade": Sizing'
        assert notification.source_type == "question"

    @pytest.mark.asyncio
    async def test_general_question(self, service, support, users):
        notification = await support.notify_new_question(make_question())
        await service.drain()

        assert recipient_ids(notification) == [ADMIN_ID]
        assert notification.content == "New question about general inquiry: Sizing"

    @pytest.mark.asyncio
    async def test_order_question_uses_order_vendors(self, service, support, users):
        order = Order(
            id="ord-1",
            order_number="SB-240101-0001",
            customer_id=CUSTOMER_ID,
            status="Processing",
            total_price=99.0,
            items=[OrderItem(product_id=PRODUCT_ID)],
            created_at="2024-01-01T10:00:00Z",
        )
        question = make_question(order_id="ord-1", order_number="SB-240101-0001", assigned_to=SECOND_VENDOR_ID)

        notification = await support.notify_new_question(question, order=order)
        await service.drain()

        assert recipient_ids(notification) == [ADMIN_ID, SECOND_VENDOR_ID, VENDOR_ID]
        assert notification.content == "New question about order #SB-240101-0001: Sizing"


class TestQuestionReply:
    @pytest.mark.asyncio
    async def test_staff_reply_goes_to_customer(self, service, support, users):
        reply = Reply(user_id=ADMIN_ID, message="Yes, it will fit.", is_admin=True)

        notification = await support.notify_question_reply(make_question(), reply)
        await service.drain()

        assert recipient_ids(notification) == [CUSTOMER_ID]
        assert notification.content == "New reply regarding your inquiry (Sizing): Yes, it will fit."

    @pytest.mark.asyncio
    async def test_customer_reply_goes_to_staff(self, service, support, users):
        question = make_question(product_id=PRODUCT_ID, product_name="Roller Shade")
        reply = Reply(user_id=CUSTOMER_ID, message="Thanks!")

        notification = await support.notify_question_reply(question, reply)
        await service.drain()

        assert recipient_ids(notification) == [ADMIN_ID, VENDOR_ID]

    @pytest.mark.asyncio
    async def test_replier_is_never_notified(self, service, support, users):
        question = make_question(product_id=PRODUCT_ID, product_name="Roller Shade")
        reply = Reply(user_id=VENDOR_ID, message="Following up internally.")

        notification = await support.notify_question_reply(question, reply)
        await service.drain()

        assert VENDOR_ID not in recipient_ids(notification)

    @pytest.mark.asyncio
    async def test_nobody_left_returns_none(self, service, support, users):
        reply = Reply(user_id=CUSTOMER_ID, message="Replying to myself", is_admin=True)

        assert await support.notify_question_reply(make_question(), reply) is None
