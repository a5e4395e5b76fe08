"""Default notification type catalog.

Seeded into the NotificationType store on startup (upsert by name).
Administrators may edit the stored templates afterwards; already created
notifications keep the content they were rendered with.

Email templates additionally receive ``name`` (recipient's first name or the
local part of their email address) and ``frontendUrl``.
"""

DEFAULT_NOTIFICATION_TYPES: list[dict] = [
    # -------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------
    {
        "name": "new_order",
        "description": "A new order containing your products was placed",
        "category": "order",
        "icon": "shopping-cart",
        "color": "green",
        "template": "A new order #{{orderNumber}} has been placed and requires processing.",
        "email_template": (
            "<h2>New Order #{{orderNumber}}</h2>"
            "<p>Hello {{name}},</p>"
            "<p>A new order with {{itemCount}} item(s) totalling ${{total}} was placed on {{orderDate}}.</p>"
            '<p><a href="{{frontendUrl}}/vendor/orders">View Orders</a></p>'
        ),
        "sms_template": "New order #{{orderNumber}} ({{itemCount}} items, ${{total}})",
    },
    {
        "name": "order_confirmation",
        "description": "Your order was received",
        "category": "order",
        "icon": "check-circle",
        "color": "green",
        "template": "Your order #{{orderNumber}} has been confirmed. Total: ${{total}}.",
        "email_template": (
            "<h2>Thank you for your order, {{name}}!</h2>"
            "<p>Your order #{{orderNumber}} has been confirmed.</p>"
            "<p><strong>Total:</strong> ${{total}}</p>"
            "<p><strong>Estimated delivery:</strong> {{estimatedDelivery}}</p>"
            '<p><a href="{{frontendUrl}}/account/orders">View Your Orders</a></p>'
        ),
        "sms_template": "Order #{{orderNumber}} confirmed. Estimated delivery {{estimatedDelivery}}.",
    },
    {
        "name": "order_status_update",
        "description": "The status of your order changed",
        "category": "order",
        "icon": "refresh",
        "color": "blue",
        "template": "Your order #{{orderNumber}} status has been updated to: {{status}}",
        "email_template": (
            "<h2>Order #{{orderNumber}} Update</h2>"
            "<p>Hello {{name}},</p>"
            "<p>Your order status changed from {{previousStatus}} to <strong>{{status}}</strong>.</p>"
            "<p>{{additionalInfo}}</p>"
            '<p><a href="{{frontendUrl}}/account/orders">View Your Orders</a></p>'
        ),
        "sms_template": "Order #{{orderNumber}} is now {{status}}.",
    },
    {
        "name": "order_shipped",
        "description": "Your order was shipped",
        "category": "order",
        "icon": "truck",
        "color": "blue",
        "template": "Your order #{{orderNumber}} has shipped. Tracking number: {{trackingNumber}}",
        "email_template": (
            "<h2>Your Order Has Shipped!</h2>"
            "<p>Good news, {{name}}! Your order #{{orderNumber}} is on its way.</p>"
            "<p><strong>Carrier:</strong> {{carrier}}</p>"
            "<p><strong>Tracking Number:</strong> {{trackingNumber}}</p>"
            '<p><a href="{{trackingUrl}}">Track Your Package</a></p>'
            "<p>Expected delivery: {{estimatedDelivery}}</p>"
        ),
        "sms_template": "Order #{{orderNumber}} shipped. Tracking: {{trackingNumber}}",
    },
    {
        "name": "order_delivered",
        "description": "Your order was delivered",
        "category": "order",
        "icon": "package",
        "color": "green",
        "template": "Your order #{{orderNumber}} was delivered on {{deliveryDate}}.",
        "email_template": (
            "<h2>Your Order Was Delivered</h2>"
            "<p>Hello {{name}},</p>"
            "<p>Your order #{{orderNumber}} was delivered on {{deliveryDate}}.</p>"
            '<p><a href="{{frontendUrl}}/measure-install">Installation guides</a></p>'
        ),
        "sms_template": "Order #{{orderNumber}} has been delivered. Thank you for shopping with us!",
    },
    # -------------------------------------------------------------------
    # Inventory
    # -------------------------------------------------------------------
    {
        "name": "low_inventory",
        "description": "Inventory for a product dropped below its threshold",
        "category": "product",
        "icon": "alert-triangle",
        "color": "orange",
        "template": (
            "Low inventory alert for {{productName}} - {{materialName}} - {{colorName}}. "
            "Current level: {{currentLevel}} (threshold {{threshold}})"
        ),
        "email_template": (
            "<h2>Low Inventory Alert</h2>"
            "<p>{{productName}} ({{materialName}}, {{colorName}}) is down to {{currentLevel}} units.</p>"
            "<p>Reorder threshold: {{threshold}}</p>"
            '<p><a href="{{frontendUrl}}/vendor/inventory">Manage Inventory</a></p>'
        ),
    },
    {
        "name": "out_of_stock",
        "description": "A product ran out of stock",
        "category": "product",
        "icon": "x-circle",
        "color": "red",
        "template": "{{productName}} - {{materialName}} - {{colorName}} is out of stock.",
        "email_template": (
            "<h2>Out of Stock</h2>"
            "<p>{{productName}} ({{materialName}}, {{colorName}}) is out of stock.</p>"
            '<p><a href="{{frontendUrl}}/vendor/inventory">Manage Inventory</a></p>'
        ),
    },
    # -------------------------------------------------------------------
    # Customer support
    # -------------------------------------------------------------------
    {
        "name": "new_question",
        "description": "A customer asked a new question",
        "category": "account",
        "icon": "help-circle",
        "color": "purple",
        "template": "New question about {{topic}}: {{subject}}",
        "email_template": (
            "<h2>New Customer Question</h2>"
            "<p>A customer asked about {{topic}}.</p>"
            "<p><strong>{{subject}}</strong></p>"
            "<p>{{message}}</p>"
            '<p><a href="{{frontendUrl}}/admin/questions">Answer Question</a></p>'
        ),
    },
    {
        "name": "question_reply",
        "description": "Someone replied to a support conversation",
        "category": "account",
        "icon": "message-circle",
        "color": "purple",
        "template": "New reply regarding {{topic}} ({{subject}}): {{replyMessage}}",
        "email_template": (
            "<h2>New Reply: {{subject}}</h2>"
            "<p>Hello {{name}},</p>"
            "<p>There is a new reply regarding {{topic}}:</p>"
            "<blockquote>{{replyMessage}}</blockquote>"
            '<p><a href="{{frontendUrl}}/account/questions">View Conversation</a></p>'
        ),
    },
    # -------------------------------------------------------------------
    # Fulfillment
    # -------------------------------------------------------------------
    {
        "name": "shipment_created",
        "description": "A shipment was created for your order",
        "category": "order",
        "icon": "truck",
        "color": "blue",
        "template": "Your order {{orderNumber}} has been shipped with {{carrier}}.",
        "email_template": (
            "<h2>Your Order Has Shipped!</h2>"
            "<p>Good news! Your order {{orderNumber}} is on its way.</p>"
            "<p><strong>Carrier:</strong> {{carrier}}</p>"
            "<p><strong>Tracking Number:</strong> {{trackingNumber}}</p>"
            '<p><a href="{{trackingUrl}}">Track Your Package</a></p>'
            "<p>Expected delivery: {{estimatedDelivery}}</p>"
            '<p><a href="{{frontendUrl}}{{detailsUrl}}">View Order Details</a></p>'
        ),
        "sms_template": (
            "Your shipment for order #{{orderNumber}} has been created. Tracking: {{trackingNumber}}"
        ),
    },
    {
        "name": "shipping_update",
        "description": "Tracking events for your shipment",
        "category": "order",
        "icon": "map-pin",
        "color": "blue",
        "template": "Update for your order {{orderNumber}}: {{description}}",
        "email_template": (
            "<h2>Shipping Update for Order {{orderNumber}}</h2>"
            "<p>{{description}}</p>"
            "<p><strong>Status:</strong> {{status}}</p>"
            "<p><strong>Date:</strong> {{eventDate}}</p>"
            "<p><strong>Location:</strong> {{location}}</p>"
            '<p><a href="{{frontendUrl}}{{detailsUrl}}">View Tracking Details</a></p>'
        ),
        "sms_template": "Order #{{orderNumber}}: {{status}}. {{description}}",
    },
    {
        "name": "damage_report",
        "description": "A customer reported shipping damage",
        "category": "order",
        "icon": "alert-octagon",
        "color": "red",
        "template": "Customer reported damage for order {{orderNumber}}: {{description}}",
        "email_template": (
            "<h2>Damage Report for Order {{orderNumber}}</h2>"
            "<p>A customer has reported damage to their shipment.</p>"
            "<p><strong>Description:</strong> {{description}}</p>"
            '<p><a href="{{frontendUrl}}{{detailsUrl}}">View Order Details</a></p>'
        ),
    },
    {
        "name": "damage_report_confirmation",
        "description": "Your damage report was received",
        "category": "order",
        "icon": "check",
        "color": "blue",
        "template": "We've received your damage report for order {{orderNumber}}",
        "email_template": (
            "<h2>We've Received Your Damage Report</h2>"
            "<p>Thank you for reporting the damage to your order {{orderNumber}}.</p>"
            "<p>Our customer service team will review your report and contact you within 24 hours.</p>"
            '<p><a href="{{frontendUrl}}{{detailsUrl}}">View Order Details</a></p>'
        ),
        "sms_template": (
            "We've received your damage report for order #{{orderNumber}}. "
            "Our team will contact you within 24 hours."
        ),
    },
    {
        "name": "return_created",
        "description": "A return shipment was created for your order",
        "category": "order",
        "icon": "rotate-ccw",
        "color": "orange",
        "template": "A return shipment has been created for your order {{orderNumber}}",
        "email_template": (
            "<h2>Return Shipment Created</h2>"
            "<p>A return shipment has been created for your order {{orderNumber}}.</p>"
            "<p><strong>Return Reason:</strong> {{returnReason}}</p>"
            "<p><strong>Tracking Number:</strong> {{trackingNumber}}</p>"
            '<p><a href="{{trackingUrl}}">Track Your Return</a></p>'
            '<p><a href="{{frontendUrl}}{{detailsUrl}}">View Return Details</a></p>'
        ),
        "sms_template": "Return for order #{{orderNumber}} has been processed. Tracking: {{trackingNumber}}",
    },
    # -------------------------------------------------------------------
    # System
    # -------------------------------------------------------------------
    {
        "name": "system_announcement",
        "description": "Announcements from the store team",
        "category": "system",
        "template": "{{message}}",
        "is_user_configurable": False,
    },
]
