import logging

from discord.ext import commands
from tabulate import tabulate

from ledgerbank.models.exceptions import BankError, MissingAccountError

logger = logging.getLogger(__name__)


def check_admin_role(ctx):
    role_name = ctx.bot.settings.admin_role_name
    return (ctx.author.id == ctx.bot.owner_id) or (role_name in [role.name for role in ctx.author.roles])


def amount_forms(n):
    """Grouped and short representations of an amount, e.g. ['1,500', '1.5K']."""
    forms = ['{:,}'.format(n)]
    for scale, suffix in ((10**9, 'B'), (10**6, 'M'), (10**3, 'K')):
        if abs(n) >= scale:
            forms.append('{:.2f}'.format(n / scale).rstrip('0').rstrip('.') + suffix)
            break
    return forms


def describe_amount(n):
    return ' / '.join(amount_forms(n))


class bankcmd(commands.Cog):
    def __init__(self, bot):
        self.bot = bot

    def _account_of(self, user):
        account = self.bot.handles.get(user.id)
        if account is None:
            raise MissingAccountError(f'{user.display_name} has no account, use register first')
        return account

    async def _reject(self, ctx, err):
        logger.info('%s rejected for %s: %s', ctx.command, ctx.author.display_name, err)
        await ctx.send('```' + str(err) + '```')

    @commands.command(name='register', help='$register n 用初始余额n新建账户')
    async def register(self, ctx, n: int):
        user = ctx.author
        if user.id in self.bot.handles:
            await ctx.send('```You already have an account```')
            return
        try:
            account = self.bot.bank.create_account(user.display_name, n)
        except BankError as err:
            await self._reject(ctx, err)
        else:
            self.bot.handles[user.id] = account
            await ctx.send('```Congratulations! Account ' + account.name + ' is created with ' + describe_amount(n) + '```')

    @commands.command(name='check', help='$check 查账户余额')
    async def check(self, ctx):
        user = ctx.author
        try:
            balance = self._account_of(user).check_balance()
        except BankError as err:
            await self._reject(ctx, err)
        else:
            await ctx.send('```' + user.display_name + ' account balance: ' + describe_amount(balance) + '```')

    @commands.command(name='deposit', help='$deposit n 存钱进账户')
    async def deposit(self, ctx, n: int):
        user = ctx.author
        try:
            self._account_of(user).deposit(n)
        except BankError as err:
            await self._reject(ctx, err)
        else:
            await ctx.send('```' + user.display_name + ' has deposited ' + describe_amount(n) + '```')

    @commands.command(name='withdraw', help='$withdraw n 从账户取钱')
    async def withdraw(self, ctx, n: int):
        user = ctx.author
        try:
            self._account_of(user).withdraw(n)
        except BankError as err:
            await self._reject(ctx, err)
        else:
            await ctx.send('```' + user.display_name + ' has withdrawn ' + describe_amount(n) + '```')

    @commands.command(name='send', help='$send name n 向账户name转账')
    async def send(self, ctx, receiver: str, n: int):
        sender = ctx.author
        try:
            self._account_of(sender).transfer(receiver, n)
        except BankError as err:
            await self._reject(ctx, err)
        else:
            await ctx.send('```' + sender.display_name + ' has sent ' + receiver.strip() + ' ' + describe_amount(n) + '```')

    @commands.command(name='total', help='$total 查银行总余额，只有@管理员可以使用')
    @commands.check(check_admin_role)
    async def total(self, ctx):
        total = self.bot.manager.get_total_bank_balance()
        await ctx.send('```Total bank balance: ' + describe_amount(total) + '```')

    @commands.command(name='accounts', help='$accounts 列出账户，只有@管理员可以使用')
    @commands.check(check_admin_role)
    async def accounts(self, ctx):
        max_output = self.bot.settings.max_listed_accounts
        accounts = list(self.bot.handles.values())[:max_output]
        if accounts == []:
            await ctx.send('```No accounts```')
            return
        rows = [[account.name, amount_forms(account.check_balance())[0]] for account in accounts]
        content = tabulate(rows, headers=['Name', 'Balance'], stralign='right', numalign='right')
        await ctx.send('```' + content + '```')


async def setup(bot):
    await bot.add_cog(bankcmd(bot))
    logger.debug('bankcmd is loaded')
