"""Contact forms."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import InputRequired


class ContactForm(FlaskForm):
    """Public contact request form."""
    name = StringField('Name', validators=[
        InputRequired(message='Name is required')
    ])
    email = StringField('Email', validators=[
        InputRequired(message='Email is required')
    ])
    phone = StringField('Phone', validators=[
        InputRequired(message='Phone is required')
    ])
    subject = StringField('Subject', validators=[
        InputRequired(message='Subject is required')
    ])
    message = TextAreaField('Message', validators=[
        InputRequired(message='Message is required')
    ])

    def contact_fields(self):
        """Submitted values keyed by model field name."""
        return {
            'name': self.name.data,
            'email': self.email.data,
            'phone': self.phone.data,
            'subject': self.subject.data,
            'message': self.message.data,
        }
