"""
View mixins for data tables.

DataTableMixin plays the caller's part for a DataTable inside a class-based
view: the table state lives in the query string, the view orders, searches
and pages the records, and the table only renders.

Example:
    class OrderListView(DataTableMixin, TemplateView):
        template_name = 'orders/list.html'
        table_columns = (
            Column('number', 'Order', accessor='display_id', sortable=True),
            Column('total', 'Total', accessor='total', align='right'),
        )
        table_selectable = True
        search_fields = ('display_id', 'email')

        def get_table_records(self):
            return Order.objects.filter(customer=self.request.user)

Templates render the table with {% data_table table_layout %}, or with
{% data_table table link=table_query %}.
"""
import logging

from django.core.exceptions import ImproperlyConfigured
from django.core.paginator import Paginator
from django.db.models import Q, QuerySet
from django.http import HttpResponseBadRequest, HttpResponseRedirect

from . import conf
from .tables import DataTable, Pagination, SortState, TableQuery
from .tables.columns import resolve_path

logger = logging.getLogger(__name__)


class DataTableMixin:
    """
    Build a controlled DataTable from the request's query string.

    Handles GET (render) and POST (bulk and row actions). Subclasses supply
    records through get_table_records(), or get_queryset() on list views.
    """
    table_columns = ()
    table_prefix = ''
    table_label = None
    table_selectable = False
    table_expandable = False
    table_searchable = False
    table_paginate = True
    table_page_size = None
    table_sort_cycle = None
    table_default_sort = ''
    table_context_name = 'table'
    search_fields = ()

    def get_table_query(self):
        if not hasattr(self, '_table_query'):
            self._table_query = TableQuery.from_request(self.request, prefix=self.table_prefix)
        return self._table_query

    def get_table_columns(self):
        if not self.table_columns:
            raise ImproperlyConfigured(
                f'{self.__class__.__name__} is missing table_columns. '
                'Define it or override get_table_columns().'
            )
        return self.table_columns

    def get_row_id(self, record):
        """Row identity as a string, matching ids read back from the query."""
        if isinstance(record, dict):
            return str(record['id'])
        return str(record.pk)

    def get_table_records(self):
        if hasattr(self, 'get_queryset'):
            return self.get_queryset()
        raise ImproperlyConfigured(
            f'{self.__class__.__name__} must define get_table_records().'
        )

    def get_page_size_options(self):
        return conf.get_table_defaults()['page_size_options']

    def get_page_size(self):
        requested = self.get_table_query().page_size
        if requested in self.get_page_size_options():
            return requested
        return self.table_page_size or conf.get_table_defaults()['page_size']

    def get_sort(self):
        """The requested sort; table_default_sort only when none is named."""
        query = self.get_table_query()
        if query.has_sort:
            return query.sort
        return SortState.from_ordering(self.table_default_sort)

    def search_records(self, records, text):
        """Keep records with text in any of search_fields."""
        if not text or not self.search_fields:
            return records
        if isinstance(records, QuerySet):
            condition = Q()
            for field in self.search_fields:
                condition |= Q(**{f'{field.replace(".", "__")}__icontains': text})
            return records.filter(condition)

        needle = text.lower()
        return [
            record for record in records
            if any(
                needle in str(resolve_path(record, field) or '').lower()
                for field in self.search_fields
            )
        ]

    def order_records(self, records, sort):
        if not sort.is_active:
            return records
        columns = {column.id: column for column in self.get_table_columns()}
        column = columns.get(sort.column_id)
        if column is None or not column.sortable:
            logger.debug('Ignoring sort on %r', sort.column_id)
            return records

        descending = sort.ordering.startswith('-')
        if isinstance(records, QuerySet):
            field = column.ordering_field
            return records.order_by(f'-{field}' if descending else field)

        # None sorts last ascending
        def sort_key(record):
            value = column.value_of(record)
            return (value is None, value)

        return sorted(records, key=sort_key, reverse=descending)

    def paginate_records(self, records, page_size):
        """Return (records on the requested page, Pagination)."""
        paginator = Paginator(records, page_size)
        page = paginator.get_page(self.get_table_query().page)
        return list(page.object_list), Pagination.from_page(page, self.get_page_size_options())

    def get_bulk_actions(self):
        return ()

    def get_row_actions(self, record):
        return ()

    def has_row_actions(self):
        return False

    def get_selectable_ids(self):
        """Row ids a POSTed selection may contain, or None to accept any.

        Called after get_table(), so it can use what get_table_records() loaded.
        """
        return None

    def render_expanded_row(self, record):
        return None

    def get_table_kwargs(self):
        """Extra keyword arguments passed to DataTable."""
        return {}

    def get_table(self, selected_rows=None):
        query = self.get_table_query()
        sort = self.get_sort()
        page_size = self.get_page_size()

        records = self.get_table_records()
        if self.table_searchable:
            records = self.search_records(records, query.search)
        records = self.order_records(records, sort)

        pagination = None
        if self.table_paginate:
            records, pagination = self.paginate_records(records, page_size)
        else:
            records = list(records)

        kwargs = {
            'get_row_id': self.get_row_id,
            'selectable': self.table_selectable,
            'selected_rows': query.selected if selected_rows is None else selected_rows,
            'sort': sort,
            'sort_cycle': self.table_sort_cycle,
            'expandable': self.table_expandable,
            'expanded_rows': query.expanded,
            'render_expanded_row': self.render_expanded_row,
            'pagination': pagination,
            'page_size': page_size,
            'searchable': self.table_searchable,
            'search_value': query.search,
            'bulk_actions': self.get_bulk_actions(),
            'row_actions': self.get_row_actions if self.has_row_actions() else None,
            'label': self.table_label,
        }
        kwargs.update(self.get_table_kwargs())
        return DataTable(records, self.get_table_columns(), **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        table = self.get_table()
        query = self.get_table_query()
        context[self.table_context_name] = table
        context['table_query'] = query
        context['table_layout'] = table.build(link=query)
        return context

    def get_success_url(self):
        """Where to go after an action: the table, with the selection cleared."""
        return self.get_table_query().href(selected=None)

    def post(self, request, *args, **kwargs):
        params = self.get_table_query().params
        selected = request.POST.getlist(params['selected'])
        table = self.get_table(selected_rows=selected)

        allowed = self.get_selectable_ids()
        if allowed is not None:
            unknown = set(selected) - set(allowed)
            if unknown:
                logger.warning('Rejected selection with unknown rows: %s', sorted(unknown))
                return HttpResponseBadRequest('Unknown rows selected')

        bulk_action = request.POST.get(params['bulk_action'])
        row_action = request.POST.get(params['row_action'])
        try:
            if bulk_action:
                table.run_bulk_action(bulk_action)
            elif row_action:
                key, _, row_id = row_action.partition(':')
                table.run_row_action(row_id, key)
            else:
                return HttpResponseBadRequest('No table action submitted')
        except KeyError as e:
            logger.warning('Rejected table action: %s', e)
            return HttpResponseBadRequest('Unknown table action')

        return HttpResponseRedirect(self.get_success_url())
