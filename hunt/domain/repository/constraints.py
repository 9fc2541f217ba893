"""Names of the store constraints that guard domain invariants.

The persistence layer declares its tables with these names and the domain
services read them back out of integrity errors, so a constraint
violation maps to the same error a failed pre-check would raise.
"""

UQ_USERS_EMAIL = "uq_users_email"
UQ_VOTES_USER_PRODUCT = "uq_votes_user_product"

FK_PRODUCTS_AUTHOR = "fk_products_author_id"
FK_VOTES_USER = "fk_votes_user_id"
FK_VOTES_PRODUCT = "fk_votes_product_id"
FK_COMMENTS_AUTHOR = "fk_comments_author_id"
FK_COMMENTS_PRODUCT = "fk_comments_product_id"

ALL_CONSTRAINTS = (
    UQ_USERS_EMAIL,
    UQ_VOTES_USER_PRODUCT,
    FK_PRODUCTS_AUTHOR,
    FK_VOTES_USER,
    FK_VOTES_PRODUCT,
    FK_COMMENTS_AUTHOR,
    FK_COMMENTS_PRODUCT,
)
